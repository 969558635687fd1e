"""Elementwise helpers for building vector parameters."""

from numbers import Real

import numpy as np

from scadscript.modifier import ScadBaseException


class VectorOperandError(ScadBaseException, TypeError):
    """The operand is not supported by the vector operation."""


def _is_scalar(value):
    return isinstance(value, (Real, np.number)) and not isinstance(value, (bool, np.bool_))


def _as_array(vector):
    if isinstance(vector, (str, bytes)):
        raise VectorOperandError('expected a numeric vector but got %r' % (vector,))
    try:
        array = np.asarray(vector)
    except ValueError as e:
        raise VectorOperandError('expected a numeric vector but got %r' % (vector,)) from e
    if array.ndim != 1 or not np.issubdtype(array.dtype, np.number):
        raise VectorOperandError('expected a numeric vector but got %r' % (vector,))
    return array


def vector_add(vector, value):
    """Adds value to each element of vector.
    Args:
        vector: A sequence of numbers.
        value: A number or a sequence of numbers the same length as vector.
    Throws:
        VectorOperandError if value is neither.
    """
    array = _as_array(vector)
    if _is_scalar(value):
        return (array + value).tolist()
    other = _as_array(value)
    if other.shape != array.shape:
        raise VectorOperandError(
            'vector lengths differ, %d and %d' % (len(array), len(other)))
    return (array + other).tolist()


def vector_multiply(vector, value):
    """Multiplies each element of vector by the number value.
    Throws:
        VectorOperandError if value is not a number.
    """
    array = _as_array(vector)
    if not _is_scalar(value):
        raise VectorOperandError('expected a number but got %r' % (value,))
    return (array * value).tolist()


vectorAdd = vector_add
vectorMultiply = vector_multiply
