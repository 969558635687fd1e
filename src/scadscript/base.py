"""scadscript is a declarative builder for OpenSCAD scripts.

A scene is a tree of immutable nodes. Shapes (circle, cube, ...) are leaves,
transformations, containers, linear extrusions and raw commands hold children.
Nodes are never modified, functions like disable(), update() and
linear_extrude() return new nodes that share the children of the original.

e.g.
    difference(
        cube(10, True),
        cylinder(12, 3, True).debug(),
    ).translate([0, 0, 5])

Compiling the tree (see scadscript.compiler) generates the OpenSCAD script:
    translate([0, 0, 5]) {
    difference() {
    cube(size=10, center=true);
    #cylinder(h=12, r=3, center=true);
    }
    }

See:
    `OpenSCAD <http://www.openscad.org/documentation.html>`
"""

from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Tuple

from frozendict import frozendict

from scadscript.modifier import OscModifier, ScadBaseException, ScadModifiers
from scadscript.params import ConversionException, merge_properties, to_param, to_properties


class InvalidNode(ScadBaseException):
    """Attempted to use an object that is not a node as a child node."""


class NotParentException(ScadBaseException):
    """Attempting to add children to a node that can't have children."""


class RawTextHookNotSet(ScadBaseException):
    """Raw.text() was called before a text hook was installed."""


SHAPES_2D = ('circle', 'square', 'polygon', 'text')
LINEAR_EXTRUDE = 'linear_extrude'
RAW = 'raw'


def check_children(children):
    """Returns children as a tuple. None entries are allowed and skipped when compiled.
    Throws:
        InvalidNode if a child is not a Node.
    """
    children = tuple(children)
    for child in children:
        if child is not None and not isinstance(child, Node):
            raise InvalidNode('Cannot use object %r as child node' % (child,))
    return children


@dataclass(frozen=True)
class Node(ScadModifiers):
    """Base of all scene nodes.

    Attributes:
        kind: The OpenScad name of the node, e.g. cube or translate.
        properties: The ordered parameters of the node, rendered as key=value.
        modifier: One of the modifiers in scadscript.modifier or None.
    """

    kind: str
    properties: frozendict = field(default_factory=frozendict)
    modifier: OscModifier = None

    def with_modifier(self, modifier):
        return replace(self, modifier=modifier)

    def set(self, properties):
        """Returns a copy with properties merged, existing keys are kept."""
        return replace(self, properties=merge_properties(self.properties, properties))

    def update(self, properties=None, **kwds):
        """Returns a copy with the new properties merged under the existing ones.

        Properties that are already set are not overwritten. This allows defaults
        to be added after the node is constructed. Keyword names starting with
        an underscore are OpenScad special variables, i.e. _fn=32 becomes $fn=32.

        Args:
            properties: A mapping of parameter names to values.
            **kwds: Additional parameters.
        """
        new_properties = dict(properties or {})
        new_properties.update(kwds)
        return self.set(new_properties)

    def linear_extrude(self, height, center=None):
        """Returns a linear_extrude node with this node as the only child."""
        return LinearExtrude(
            properties=merge_properties(to_properties({'center': center}), {'height': height}),
            children=(self,),
        )

    linearExtrude = linear_extrude

    def can_have_children(self):
        """This is a childless node, always returns False."""
        return False

    def has_children(self):
        return False

    def children_nodes(self):
        """This is a childless node, always returns empty tuple."""
        return ()

    def append(self, *children):
        raise NotParentException('%s can not have children' % self.kind)

    def translate(self, v):
        return translate(v, self)

    def rotate(self, a):
        return rotate(a, self)

    def scale(self, v):
        return scale(v, self)

    def resize(self, newsize):
        return resize(newsize, self)

    def mirror(self, v):
        return mirror(v, self)

    def color(self, c):
        return color(c, self)

    def __add__(self, other):
        """Union of this with other object. See union."""
        return union(self, other)

    def __sub__(self, other):
        """Difference of this with other object. See difference."""
        return difference(self, other)

    def __and__(self, other):
        """Intersect this with other object. See intersection."""
        return intersection(self, other)

    # SolidPython compatibility
    __mul__ = __and__

    def compile(self, sink, **kwds):
        """Writes the OpenScad script for this node to sink."""
        from scadscript.compiler import compile as compile_node
        compile_node(self, sink, **kwds)

    def dumps(self, **kwds):
        """Returns a string of this object's OpenScad script."""
        from scadscript.compiler import compile_to_str
        return compile_to_str(self, **kwds)

    def dump(self, fp, **kwds):
        """Writes this object's OpenScad script to the given file.
        Args:
            fp: The python file object to use.
        """
        from scadscript.compiler import FileWriter
        self.compile(FileWriter(fp), **kwds)

    def write(self, filename, encoding='utf-8', **kwds):
        """Writes the OpenScad script to the given file name. The file is removed
        if the script can't be generated.
        Args:
            filename: The filename to create.
        """
        from scadscript.compiler import output_file
        with output_file(filename, encoding=encoding) as fp:
            self.dump(fp, **kwds)

    def __str__(self):
        """Returns the OpenScad equivalent code for this node."""
        return self.dumps()


@dataclass(frozen=True)
class Shape(Node):
    """A leaf 2D or 3D primitive, compiled as kind(key=value, ...);"""

    @property
    def dimensions(self):
        return 2 if self.kind in SHAPES_2D else 3


@dataclass(frozen=True)
class ParentNode(Node):
    """A node with an ordered tuple of children."""

    children: Tuple[Any, ...] = ()

    def can_have_children(self):
        return True

    def has_children(self):
        """Returns true if the node has children other than None."""
        return any(child is not None for child in self.children)

    def children_nodes(self):
        """Returns the children, skipping None entries."""
        return tuple(child for child in self.children if child is not None)

    def append(self, *children):
        """Returns a copy with the given children appended."""
        return replace(self, children=self.children + check_children(children))

    # Support translate(v)(child, ...) constructs like that in OpenScad.
    __call__ = append


@dataclass(frozen=True)
class LinearExtrude(ParentNode):
    """Extrudes the child 2D shape along the z axis."""

    kind: str = field(default=LINEAR_EXTRUDE, init=False)


@dataclass(frozen=True)
class Container(ParentNode):
    """Combines children with a CSG operation, compiled as kind() { ... }"""


@dataclass(frozen=True)
class Transformation(ParentNode):
    """Applies a single positional parameter to the children,
    compiled as kind(param) { ... }"""

    param: Any = None


@dataclass(frozen=True)
class Raw(ParentNode):
    """A literal OpenScad command. With children it is compiled as a block
    command { ... } otherwise as a statement command;"""

    kind: str = field(default=RAW, init=False)
    command: str = ''

    _text_hook = None

    @classmethod
    def set_text_hook(cls, hook):
        """Installs the callable receiving text from Raw.text(). Returns the
        previous hook."""
        previous = Raw._text_hook
        Raw._text_hook = hook
        return previous

    @classmethod
    @contextmanager
    def text_hook(cls, hook):
        """Context manager installing hook for the duration of the block."""
        previous = cls.set_text_hook(hook)
        try:
            yield hook
        finally:
            cls.set_text_hook(previous)

    @classmethod
    def text(cls, line):
        """Emits literal text through the installed hook."""
        if Raw._text_hook is None:
            raise RawTextHookNotSet('No text hook installed for Raw.text(%r)' % (line,))
        Raw._text_hook(line)


def _shape(kind, properties, center=None):
    return Shape(kind=kind).set({'center': center}).set(properties)


# 2D shapes
def circle(radius):
    """Creates a circle of the given radius."""
    return _shape('circle', {'r': radius})


def square(size, center=None):
    """Creates a square, size is a number or [x, y]."""
    return _shape('square', {'size': size}, center)


def polygon(points):
    return _shape('polygon', {'points': points})


def text(text, size=None, font=None):
    """Creates 2D text. size and font are omitted when None."""
    return _shape('text', {'text': text, 'size': size, 'font': font})


# 3D shapes
def sphere(radius):
    return _shape('sphere', {'r': radius})


def cube(size, center=None):
    """Creates a cube, size is a number or [x, y, z]."""
    return _shape('cube', {'size': size}, center)


def cylinder(height, radius, center=None):
    """Creates a cylinder of height h. radius is either a number or a pair of
    (bottom, top) radii for a cone.
    """
    properties = {'h': height}
    if isinstance(radius, (list, tuple)) or getattr(radius, 'ndim', 0) > 0:
        if len(radius) != 2:
            raise ConversionException(
                'cylinder radius must be a number or a (bottom, top) pair, got %r' % (radius,))
        properties['r1'] = radius[0]
        properties['r2'] = radius[1]
    else:
        properties['r'] = radius
    return _shape('cylinder', properties, center)


# Containers
def _container(kind, children):
    return Container(kind=kind, children=check_children(children))


def union(*children):
    return _container('union', children)


def difference(*children):
    """Removes the children following the first child from the first child."""
    return _container('difference', children)


def intersection(*children):
    return _container('intersection', children)


def hull(*children):
    return _container('hull', children)


def minkowski(*children):
    return _container('minkowski', children)


# Transformations
def _transformation(kind, param, children):
    return Transformation(kind=kind, param=to_param(param), children=check_children(children))


def translate(v, *children):
    return _transformation('translate', v, children)


def rotate(a, *children):
    """Rotates children by an angle or an [x, y, z] vector of angles."""
    return _transformation('rotate', a, children)


def scale(v, *children):
    return _transformation('scale', v, children)


def resize(newsize, *children):
    return _transformation('resize', newsize, children)


def mirror(v, *children):
    """Mirrors children across the plane with normal v."""
    return _transformation('mirror', v, children)


def color(c, *children):
    """Colors children, c is a color name or an RGB(A) vector."""
    return _transformation('color', c, children)


# Raw
def raw(command, *children):
    """Passes command through to the script unmodified."""
    return Raw(command=command, children=check_children(children))
