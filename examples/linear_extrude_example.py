"""
linear_extrude_example.py: A scadscript example.

Extrudes a rounded 2D outline into a plate with fine facets.

```openscad
linear_extrude(height=5, center=true) {
hull() {
translate([-10, 0]) {
circle($fn=64, r=4);
}
translate([10, 0]) {
circle($fn=64, r=4);
}
}
}
```
"""

from scadscript import circle, hull, scad_main


def main():
    end = circle(4).update(_fn=64)
    outline = hull(end.translate([-10, 0]), end.translate([10, 0]))
    return outline.linear_extrude(5, True)


if __name__ == "__main__":
    scad_main(main)
