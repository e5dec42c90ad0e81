# -----------------------------------------------------------------------------
#  primes_table.py
#  Indices of known Fibonacci primes
# -----------------------------------------------------------------------------

from __future__ import annotations

from bisect import bisect_left

"""
Indices n for which F(n) is a known prime, from OEIS A001605
(https://oeis.org/A001605). Some of the larger entries only correspond to
probable primes.

Membership is a table lookup, not a primality test: an index above the
largest entry is reported as "not known to be prime".
"""

FIBO_PRIME_INDICES: tuple[int, ...] = (
    3, 4, 5, 7, 11, 13, 17, 23, 29, 43, 47, 83, 131, 137, 359, 431,
    433, 449, 509, 569, 571, 2971, 4723, 5387, 9311, 9677,
    14431, 25561, 30757, 35999, 37511, 50833, 81839, 104911,
    130021, 148091, 201107, 397379, 433781, 590041, 593689,
    604711, 931517, 1049897, 1285607, 1636007, 1803059,
    1968721, 2904353,
)


def is_fibo_prime(n: int) -> bool:
    """Return True if F(n) is listed as (probably) prime."""
    i = bisect_left(FIBO_PRIME_INDICES, n)
    return i < len(FIBO_PRIME_INDICES) and FIBO_PRIME_INDICES[i] == n


def largest_known_index() -> int:
    return FIBO_PRIME_INDICES[-1]
