"""
Sieve of Eratosthenes over [0, size).

Responsibility: composite marking only. No bound estimation, no dtype logic.
"""

import numpy as np

from .errors import InvalidCount


def mark_composites(size: int) -> np.ndarray:
    """
    Return a boolean mask where mask[i] is True iff i is proven composite.

    Indices 0 and 1 are left False; they are never prime and callers skip them.

    Parameters
    ----------
    size : int
        Exclusive ceiling (size >= 0).

    Returns
    -------
    np.ndarray
        Boolean array of length size.
    """
    if size < 0:
        raise InvalidCount(f"sieve size must be non-negative, got {size}")

    mask = np.zeros(size, dtype=bool)
    # multiples below p*p were already struck by a smaller factor
    p = 2
    while p * p < size:
        if not mask[p]:
            mask[p*p::p] = True
        p += 1
    return mask


def candidate_indices(mask: np.ndarray, start: int = 2) -> np.ndarray:
    """Ascending indices >= start that the sieve left unmarked."""
    if len(mask) <= start:
        return np.empty(0, dtype=np.int64)
    return np.flatnonzero(~mask[start:]).astype(np.int64) + start
