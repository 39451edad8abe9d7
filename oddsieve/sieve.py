"""
Odd-only sieve of Eratosthenes.

Only odd numbers are stored, which halves the memory of a flag-per-integer
sieve. Even numbers other than 2 are never prime, so nothing is lost.

Index mapping:
- Index i → 2i + 1
- Odd n   → (n - 1) // 2 = n // 2

For i=0: n=1 (not prime)
For i=1: n=3
For i=2: n=5
For i=4: n=9 = 3*3
Index 2i(i+1) → (2i+1)^2, the first multiple the prime 2i+1 clears
"""

import math
import numpy as np

# Smaller limits give arrays too short for the wheel to start on.
MIN_LIMIT = 10


def index_to_n(i: int) -> int:
    """Convert odd-only index to the number it represents."""
    return 2 * i + 1


def n_to_index(n: int) -> int:
    """Convert odd number to its odd-only index."""
    if n % 2 == 0:
        raise ValueError(f"{n} is even and has no odd-only index")
    return n // 2


def upper_bound_of(flags: np.ndarray) -> int:
    """Largest number a flag array of this length answers for."""
    return index_to_n(len(flags) - 1)


def clear_multiples(flags: np.ndarray, p: int, offset: int = 0) -> None:
    """
    Clear the flags of odd multiples of the odd prime p, from p*p onwards.

    Parameters
    ----------
    flags : np.ndarray
        Odd-only flags, possibly a segment starting at index ``offset``.
    p : int
        Odd prime.
    offset : int
        Odd-only index of ``flags[0]``.
    """
    # Consecutive odd multiples of p are p apart in index space.
    start = n_to_index(p * p)
    if start < offset:
        start += ((offset - start + p - 1) // p) * p
    flags[start - offset::p] = False


def odd_prime_flags(limit: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff 2i+1 is prime.

    Parameters
    ----------
    limit : int
        Requested bound. Clamped up to MIN_LIMIT; the array covers every
        odd number up to ``limit``.

    Returns
    -------
    np.ndarray
        Boolean array of length (max(limit, MIN_LIMIT) + 1) // 2.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    limit = max(MIN_LIMIT, limit)

    flags = np.ones((limit + 1) // 2, dtype=bool)
    flags[0] = False  # 1 isn't prime

    # 3 gets its own pass so the wheel below can skip its multiples.
    clear_multiples(flags, 3)

    root = math.isqrt(upper_bound_of(flags))

    # Start at 5; indices i ≡ 1 (mod 3) hold odd multiples of 3, so the
    # wheel steps +1, +2, +1, +2, ... over 5, 7, 11, 13, 17, 19, ...
    candidate_index = 2
    tick = 1
    candidate_value = index_to_n(candidate_index)
    while candidate_value <= root:
        if flags[candidate_index]:
            clear_multiples(flags, candidate_value)

        candidate_index += tick
        tick = 3 - tick
        candidate_value = index_to_n(candidate_index)

    return flags


def odd_primes_upto(limit: int) -> np.ndarray:
    """Return array of all odd primes <= limit (2 is not included)."""
    primes = 2 * np.nonzero(odd_prime_flags(limit))[0] + 1
    return primes[primes <= limit]
