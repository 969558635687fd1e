"""
raw_example.py: A scadscript example using raw OpenSCAD commands.

Model scripts run by the scadscript command can use the API without importing it.

```openscad
$fn = 48;
render(convexity=4) {
difference() {
cylinder(h=20, r1=8, r2=4);
cylinder(h=20, r=2);
}
}
```

How to run this example:

  scadscript examples/raw_example.py raw.scad
"""


def main():
    Raw.text('$fn = 48;')
    body = cylinder(20, [8, 4]) - cylinder(20, 2)
    return raw('render(convexity=4)', body)
