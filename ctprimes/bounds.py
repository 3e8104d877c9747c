"""
Upper-bound estimation for count-mode prime tables.

Responsibility: turn a prime count into a sieve ceiling. No sieving here.

For n >= 6 the n-th prime satisfies

    p_n < n (ln n + ln ln n)

so sieving [0, floor(bound) + 1) always reaches p_n. Below that the bound is
not defined (ln ln 1 < 0) and a fixed small ceiling is used instead.
"""

import math

# [0, 15) holds 2, 3, 5, 7, 11, 13: enough for any n <= 6
SMALL_COUNT_CEILING = 15
SMALL_COUNT_LIMIT = 6

# Largest count checked end-to-end against the sieve (see tests/test_sieve.py
# and `ctprimes verify`). Above it the ceiling is padded.
VALIDATED_MAX_COUNT = 10**7
UNVALIDATED_MARGIN = 0.01


def estimate_ceiling(n: int) -> int:
    """
    Return an exclusive sieve ceiling containing at least n primes.

    Parameters
    ----------
    n : int
        Number of primes wanted (n >= 0).

    Returns
    -------
    int
        Ceiling C such that [0, C) contains at least n primes.
    """
    if n <= SMALL_COUNT_LIMIT:
        return SMALL_COUNT_CEILING

    log_n = math.log(n)
    ceiling = int(n * log_n + n * math.log(log_n)) + 1

    if n > VALIDATED_MAX_COUNT:
        ceiling = math.ceil(ceiling * (1 + UNVALIDATED_MARGIN))
    return ceiling


def mask_nbytes(size: int) -> int:
    """Bytes occupied by a composite mask over [0, size) (one bool per entry)."""
    return max(size, 0)
