"""
difference_example.py: A scadscript example.

Removes a debug highlighted sphere from a colored cube.

```openscad
difference() {
color("red") {
cube(size=10, center=true);
}
#sphere(r=7);
}
```

How to run this example:

  python examples/difference_example.py difference.scad

or through the scadscript command:

  scadscript examples/difference_example.py difference.scad
"""

# 1. Import the necessary components from the library.
from scadscript import cube, scad_main, sphere

# 2. Create an instance of the model.
MODEL = cube(10, True).color('red') - sphere(7).debug()


def main():
    return MODEL


# 3. Use the `scad_main` utility to write the script.
if __name__ == "__main__":
    scad_main(MODEL)
