"""
Cross-check the sieve against independent answers.

Compares:
1. Count mode against ceiling mode (same primes, same order)
2. Every produced prime against trial division
3. The estimated ceiling against the actual n-th prime

Run at small counts first; trial division is the slow part.
"""

import math
import time
from typing import Dict, Any

import numpy as np

from .bounds import estimate_ceiling, mask_nbytes
from .extract import first_n_primes, primes_below
from .widths import check_count


def is_prime_trial(n: int) -> bool:
    """Trial division primality test. Independent of the sieve."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    for d in range(3, math.isqrt(n) + 1, 2):
        if n % d == 0:
            return False
    return True


def verify_count(n: int, verbose: bool = True) -> Dict[str, Any]:
    """
    Verify the first n primes three ways and report ceiling and memory.

    Returns
    -------
    dict
        Keys: n, ceiling, mask_bytes, last_prime, slack, modes_agree,
        all_prime, ascending, ok, t_count, t_below, t_trial.
    """
    n = check_count(n, 'count')
    if verbose:
        print(f"\n=== Verifying first {n:,} primes ===")

    ceiling = estimate_ceiling(n)

    t0 = time.time()
    by_count = first_n_primes(n)
    t_count = time.time() - t0

    last = int(by_count[-1]) if n else 0
    t0 = time.time()
    by_bound = primes_below(last + 1)
    t_below = time.time() - t0

    modes_agree = np.array_equal(by_count, by_bound)
    ascending = bool(np.all(np.diff(by_count) > 0))

    t0 = time.time()
    failures = [int(p) for p in by_count if not is_prime_trial(int(p))]
    t_trial = time.time() - t0

    report = {
        'n': n,
        'ceiling': ceiling,
        'mask_bytes': mask_nbytes(ceiling),
        'last_prime': last,
        'slack': ceiling - last,
        'modes_agree': modes_agree,
        'all_prime': not failures,
        'ascending': ascending,
        't_count': t_count,
        't_below': t_below,
        't_trial': t_trial,
    }
    report['ok'] = modes_agree and ascending and not failures and len(by_count) == n

    if verbose:
        print(f"  Ceiling: {ceiling:,} (mask {report['mask_bytes']/1e6:.2f}MB)")
        print(f"  Last prime: {last:,}, slack {report['slack']:,}")
        print(f"  Count mode: {t_count:.3f}s, ceiling mode: {t_below:.3f}s")
        print(f"  Trial division: {t_trial:.2f}s")
        for p in failures[:10]:
            print(f"  COMPOSITE in output: {p}")
        if report['ok']:
            print(f"  ✓ All {n:,} primes verified")
        else:
            print(f"  ✗ Verification failed "
                  f"(modes_agree={modes_agree}, ascending={ascending}, "
                  f"composites={len(failures)})")

    return report
