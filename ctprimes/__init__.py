"""
Ordered prime tables from a Sieve of Eratosthenes.

    >>> primes(5)
    array([ 2,  3,  5,  7, 11])
    >>> primes_less_than(10, np.uint8)
    array([2, 3, 5, 7], dtype=uint8)

Results are memoized per (mode, argument, width) and returned read-only.
"""

from functools import lru_cache

import numpy as np

from .errors import (
    BoundUnderflow,
    InvalidCount,
    InvalidWidth,
    PrimesError,
    WidthOverflow,
)
from .extract import first_n_primes, primes_below
from .widths import check_count, resolve_width

__version__ = '0.1.0'

__all__ = [
    'primes',
    'primes_less_than',
    'clear_cache',
    'PrimesError',
    'InvalidWidth',
    'InvalidCount',
    'WidthOverflow',
    'BoundUnderflow',
]

_EXTRACTORS = {
    'count': first_n_primes,
    'below': primes_below,
}


@lru_cache(maxsize=128)
def _table(mode: str, n: int, dtype: np.dtype) -> np.ndarray:
    result = _EXTRACTORS[mode](n, dtype)
    result.flags.writeable = False
    return result


def primes(count, width=np.int64) -> np.ndarray:
    """
    Return exactly `count` primes in ascending order.

    Parameters
    ----------
    count : int
        Number of primes (Python or numpy integer, >= 0).
    width : dtype-like
        Integer element type of the result.

    Returns
    -------
    np.ndarray
        Read-only array of length count.
    """
    dtype = resolve_width(width)
    return _table('count', check_count(count, 'count'), dtype)


def primes_less_than(bound, width=None) -> np.ndarray:
    """
    Return every prime strictly below `bound` in ascending order.

    Without an explicit width the result takes the dtype of `bound` when it is
    a numpy integer scalar, int64 otherwise.
    """
    if width is None and isinstance(bound, np.integer):
        width = bound.dtype
    dtype = resolve_width(width)
    return _table('below', check_count(bound, 'bound'), dtype)


def clear_cache() -> None:
    """Forget memoized tables."""
    _table.cache_clear()
