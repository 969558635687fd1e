"""
OpenScad modifiers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True, repr=False)
class OscModifier(object):
    """Defines an OpenScad modifier

    see: https://en.wikibooks.org/wiki/OpenSCAD_User_Manual/Modifier_Characters
    """
    modifier: str = field(compare=True)
    name: str = field(compare=False)

    def __repr__(self):
        return self.name


DISABLE = OscModifier('*', 'DISABLE') # Ignore this subtree
SHOW_ONLY = OscModifier('!', 'SHOW_ONLY') # Ignore the rest of the tree
DEBUG = OscModifier('#', 'DEBUG') # Highlight the object
TRANSPARENT = OscModifier('%', 'TRANSPARENT')  # Background modifier
BASE_MODIFIERS = (DISABLE, SHOW_ONLY, DEBUG, TRANSPARENT)
BASE_MODIFIERS_SET = set(BASE_MODIFIERS)


class ScadBaseException(Exception):
    """Base exception functionality"""


class InvalidModifier(ScadBaseException):
    """Attempting to attach an unknown modifier."""


def check_is_valid_modifier(modifier):
    """Raises InvalidModifier if modifier is not one of BASE_MODIFIERS."""
    if modifier not in BASE_MODIFIERS_SET:
        raise InvalidModifier(
            '"%r" is not a valid modifier. Must be one of %r' % (modifier, BASE_MODIFIERS)
        )
    return modifier


class ScadModifiers(ABC):
    """Functions to attach OpenScad modifiers to a node.

    Nodes are immutable so each function returns a new node carrying the
    modifier. A node holds a single modifier, the most recent one wins.

    e.g.
    difference(cylinder(1, 1), cube(1).debug())

    Will render the cube with the # OpenScad modifier.
        difference() {
        cylinder(h=1, r=1);
        #cube(size=1);
        }
    """

    @abstractmethod
    def with_modifier(self, modifier):
        """Returns a copy of this node with the given modifier."""

    def add_modifier(self, modifier):
        """Returns a copy with one of DISABLE, SHOW_ONLY, DEBUG or TRANSPARENT.
        Args:
          modifier: The modifier being attached. Checked for validity.
        """
        return self.with_modifier(check_is_valid_modifier(modifier))

    def remove_modifier(self):
        """Returns a copy of this node without a modifier."""
        return self.with_modifier(None)

    def has_modifier(self, modifier):
        """Checks for presence of a modifier, one of DISABLE, SHOW_ONLY, DEBUG or TRANSPARENT.
        Args:
          modifier: The modifier being inspected. Checked for validity.
        """
        check_is_valid_modifier(modifier)
        return self.modifier == modifier

    def get_modifiers(self):
        """Returns the current modifier as an OpenScad modifier prefix string."""
        if self.modifier is None:
            return ''
        return self.modifier.modifier

    def disable(self):
        return self.add_modifier(DISABLE)

    def only(self):
        return self.add_modifier(SHOW_ONLY)

    def debug(self):
        return self.add_modifier(DEBUG)

    def background(self):
        return self.add_modifier(TRANSPARENT)
