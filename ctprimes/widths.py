"""
Element width validation.

A width is anything np.dtype() accepts that resolves to a signed or unsigned
integer dtype. Booleans, characters, strings, floats and objects are refused
before any sieving happens.
"""

import numbers

import numpy as np

from .errors import InvalidCount, InvalidWidth, WidthOverflow

DEFAULT_WIDTH = np.dtype(np.int64)

# numpy dtype.kind codes for plain integers
_INTEGER_KINDS = ('i', 'u')


def resolve_width(width) -> np.dtype:
    """
    Normalize a width specification to an integer numpy dtype.

    Parameters
    ----------
    width : dtype-like or None
        np.int8, 'uint16', np.dtype('i4'), int, ... None means DEFAULT_WIDTH.

    Returns
    -------
    np.dtype
        The resolved integer dtype.
    """
    if width is None:
        return DEFAULT_WIDTH
    try:
        dtype = np.dtype(width)
    except TypeError as exc:
        raise InvalidWidth(f"{width!r} is not a numpy dtype") from exc

    if dtype.kind not in _INTEGER_KINDS:
        raise InvalidWidth(f"{dtype} is not an integer element width")
    # every integer dtype holds at least 127, so 2 always fits
    return dtype


def width_max(dtype: np.dtype) -> int:
    """Largest value representable by an integer dtype."""
    return int(np.iinfo(dtype).max)


def check_fits(largest: int, dtype: np.dtype) -> None:
    """Raise WidthOverflow if `largest` is above the dtype maximum."""
    maximum = width_max(dtype)
    if largest > maximum:
        raise WidthOverflow(largest, dtype, maximum)


def check_count(value, name: str = 'count') -> int:
    """
    Validate a count or bound argument and return it as a Python int.

    Accepts Python ints and numpy integer scalars. bool is refused even though
    it subclasses int.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise InvalidCount(f"{name} must be an integer, got {type(value).__name__}")
    value = int(value)
    if value < 0:
        raise InvalidCount(f"{name} must be non-negative, got {value}")
    return value
