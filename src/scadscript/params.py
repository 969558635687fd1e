"""Parameter values for OpenScad nodes.

Values are converted once, when a node is constructed, into one of:
  * a number (int or float, kept as given),
  * a str,
  * an OscKeyword (OSC_TRUE or OSC_FALSE),
  * a tuple of any of the above (nested tuples are allowed).

Rendering then only needs to distinguish these forms.
"""

from numbers import Real

import numpy as np
from frozendict import frozendict

from scadscript.modifier import ScadBaseException


class ConversionException(ScadBaseException):
    """Exception for conversion errors."""


class OscKeyword(object):
    """Converts to the given string for allowing True to to true and False to false conversion.
    In the special case of the 'false' keyword, it converts to False on bool cast.
    """

    def __init__(self, kw):
        self.kw = kw
        self._bool_value = (0, 1)[kw != 'false']

    def __str__(self):
        return self.kw

    def __repr__(self):
        return self.kw

    def __len__(self):
        return self._bool_value

    def __eq__(self, other):
        return isinstance(other, OscKeyword) and self.kw == other.kw

    def __hash__(self):
        return hash(self.kw)


OSC_TRUE = OscKeyword('true')
OSC_FALSE = OscKeyword('false')

# Python names starting with _ map to OpenScad special variables e.g. _fn -> $fn.
SPECIAL_VARIABLE_PREFIX = '_'


def osc_name(name):
    """Returns the OpenScad parameter name for the given python name."""
    if name.startswith(SPECIAL_VARIABLE_PREFIX):
        return '$' + name[len(SPECIAL_VARIABLE_PREFIX):]
    return name


def to_param(value):
    """Converts a python value into a parameter value.
    Args:
        value: A number, bool, str or (possibly nested) sequence of these.
    Throws:
        ConversionException if the value has no OpenScad representation.
    """
    if isinstance(value, OscKeyword):
        return value
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, bool):
        return OSC_TRUE if value else OSC_FALSE
    if isinstance(value, Real):
        return value
    if isinstance(value, str):
        return value
    if isinstance(value, np.ndarray):
        value = value.tolist()
    if isinstance(value, (list, tuple)):
        return tuple(to_param(v) for v in value)
    raise ConversionException(
        'value "%r" of type %s has no OpenScad representation' % (value, value.__class__.__name__)
    )


def to_properties(mapping):
    """Returns a frozendict of converted values, None values are dropped."""
    return frozendict(
        (osc_name(k), to_param(v)) for k, v in mapping.items() if v is not None)


def merge_properties(existing, new):
    """Merges new properties under existing ones.

    Keys already present in existing keep their value. The resulting order is
    the order of new followed by the keys only found in existing.
    """
    merged = dict(to_properties(new))
    merged.update(existing)
    return frozendict(merged)


def render_str(value):
    escaped = value.replace('\\', '\\\\').replace('"', '\\"')
    return '"' + escaped + '"'


def render_value(value):
    """Returns a string representing the given value."""
    if isinstance(value, tuple):
        return '[' + ', '.join(render_value(v) for v in value) + ']'
    if isinstance(value, str):
        return render_str(value)
    return str(value)


def render_name_value(name, value):
    return '%s=%s' % (name, render_value(value))


def render_params(properties):
    """Returns the key=value list for a parameter list."""
    return ', '.join(render_name_value(k, v) for k, v in properties.items())
