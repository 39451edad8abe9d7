"""
Prime store built from an odd-only sieve.

Responsibility: the read-only table and the queries over it (primality,
iteration, factorization). Construction lives in sieve.py and
parallel_sieve.py.
"""

from typing import Optional

import numpy as np

from .estimates import estimate_pi as default_estimate_pi
from .factorization import Factorization, trial_factor
from .iteration import PiEstimator, PrimeIterator
from .parallel_sieve import odd_prime_flags_parallel
from .sieve import n_to_index, odd_prime_flags, upper_bound_of


class Primes:
    """
    Primality information for every number up to ``upper_bound()``.

    Uses about ``limit / 2`` bytes: one numpy bool per odd number. Numbers
    below ``upper_bound() ** 2`` can always be fully factored.
    """

    def __init__(self, flags: np.ndarray,
                 estimate_pi: Optional[PiEstimator] = None):
        """
        Parameters
        ----------
        flags : np.ndarray
            Odd-only flags as returned by ``odd_prime_flags``. The array is
            made read-only and shared, not copied.
        estimate_pi : callable, optional
            ``n -> (lower, upper)`` bounds on pi(n), used for size hints.
        """
        if flags.ndim != 1 or len(flags) == 0:
            raise ValueError("flags must be a non-empty 1-D array")
        flags.flags.writeable = False
        self._flags = flags
        self._estimate_pi = estimate_pi or default_estimate_pi

    @property
    def flags(self) -> np.ndarray:
        """Read-only odd-only flags; flags[i] is True iff 2i+1 is prime."""
        return self._flags

    def upper_bound(self) -> int:
        """The largest number stored."""
        return upper_bound_of(self._flags)

    def is_prime(self, n: int) -> bool:
        """
        Check if n is prime.

        Raises ValueError if n is odd and outside 0..upper_bound(); callers
        must check the bound first.
        """
        if n % 2 == 0:
            return n == 2
        if not 0 <= n <= self.upper_bound():
            raise ValueError(
                f"{n} is outside the sieve range 0..{self.upper_bound()}")
        return bool(self._flags[n_to_index(n)])

    def primes(self) -> PrimeIterator:
        """Iterator over the primes stored, starting at 2."""
        return PrimeIterator(self._flags, self._estimate_pi)

    def factor(self, n: int) -> Factorization:
        """
        Factor n into (prime, exponent) pairs.

        Returns ``Complete(factors)``, or ``Incomplete(leftover, factors)``
        when n is zero (leftover 0) or when n has a prime factor above
        ``upper_bound() ** 2`` or more than one prime factor between
        ``upper_bound()`` and ``upper_bound() ** 2``.
        """
        return trial_factor(n, self.primes(), self.upper_bound())

    def __repr__(self) -> str:
        return f"Primes(upper_bound={self.upper_bound()})"


def sieve(limit: int, estimate_pi: Optional[PiEstimator] = None) -> Primes:
    """
    Construct a Primes store via a sieve up to at least limit.

    All primes <= limit are stored (possibly a few more), and every number
    below upper_bound()**2 can be fully factored.
    """
    return Primes(odd_prime_flags(limit), estimate_pi)


def sieve_parallel(limit: int, num_workers: Optional[int] = None,
                   segment_size: Optional[int] = None,
                   estimate_pi: Optional[PiEstimator] = None,
                   verbose: bool = False) -> Primes:
    """Same store as ``sieve``, built segment by segment across processes."""
    flags = odd_prime_flags_parallel(limit, num_workers=num_workers,
                                     segment_size=segment_size,
                                     verbose=verbose)
    return Primes(flags, estimate_pi)
