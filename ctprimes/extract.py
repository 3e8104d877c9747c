"""
Turn a composite mask into a prime table.

Two modes:
- count mode: exactly n primes, ceiling chosen by bounds.estimate_ceiling
- ceiling mode: every prime strictly below a caller-given bound
"""

import numpy as np

from .bounds import estimate_ceiling
from .errors import BoundUnderflow
from .sieve import candidate_indices, mark_composites
from .widths import check_count, check_fits, resolve_width


def _to_width(found: np.ndarray, dtype: np.dtype) -> np.ndarray:
    """Cast ascending primes to dtype, refusing values that would wrap."""
    if len(found):
        check_fits(int(found[-1]), dtype)
    return found.astype(dtype)


def first_n_primes(n: int, width=None) -> np.ndarray:
    """
    Return the first n primes in ascending order.

    Parameters
    ----------
    n : int
        Number of primes (n >= 0).
    width : dtype-like, optional
        Integer element type of the result. Defaults to int64.

    Returns
    -------
    np.ndarray
        Array of length exactly n.

    Raises
    ------
    InvalidCount
        n is negative or not an integer.
    BoundUnderflow
        The estimated ceiling held fewer than n primes.
    WidthOverflow
        The n-th prime does not fit in width.
    """
    n = check_count(n, 'count')
    dtype = resolve_width(width)
    if n == 0:
        return np.empty(0, dtype=dtype)

    ceiling = estimate_ceiling(n)
    found = candidate_indices(mark_composites(ceiling))
    if len(found) < n:
        raise BoundUnderflow(n, len(found), ceiling)
    return _to_width(found[:n], dtype)


def primes_below(m: int, width=None) -> np.ndarray:
    """
    Return all primes p < m in ascending order.

    m of 0, 1 or 2 gives an empty array.
    """
    m = check_count(m, 'bound')
    dtype = resolve_width(width)
    return _to_width(candidate_indices(mark_composites(m)), dtype)
