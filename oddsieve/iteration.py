"""
Iteration over the primes held in an odd-only flag array.

The iterator is a pair of cursors over the shared, read-only flags plus a
flag for the prime 2, which the odd-only layout does not store. Copying it
copies three scalars; the flags themselves are never duplicated.
"""

from typing import Callable, Iterator, Tuple

import numpy as np

from .sieve import index_to_n

PiEstimator = Callable[[int], Tuple[int, int]]


class PrimeIterator:
    """
    Bidirectional, copyable iterator over 2 and the flagged odd numbers.

    ``next()`` walks upwards from 2, ``next_back()`` walks downwards and
    yields 2 last. Both may be mixed freely; each prime is produced once.
    """

    __slots__ = ('_flags', '_estimate_pi', '_two', '_front', '_back')

    def __init__(self, flags: np.ndarray, estimate_pi: PiEstimator):
        self._flags = flags
        self._estimate_pi = estimate_pi
        self._two = True
        self._front = 0
        self._back = len(flags)  # exclusive

    def __iter__(self) -> 'PrimeIterator':
        return self

    def __next__(self) -> int:
        if self._two:
            self._two = False
            return 2

        flags = self._flags
        while self._front < self._back:
            i = self._front
            self._front += 1
            if flags[i]:
                return index_to_n(i)
        raise StopIteration

    def next_back(self) -> int:
        """Return the largest remaining prime, raising StopIteration when done."""
        flags = self._flags
        while self._front < self._back:
            self._back -= 1
            if flags[self._back]:
                return index_to_n(self._back)

        if self._two:
            self._two = False
            return 2
        raise StopIteration

    def __reversed__(self) -> Iterator[int]:
        while True:
            try:
                yield self.next_back()
            except StopIteration:
                return

    def copy(self) -> 'PrimeIterator':
        """Independent iterator positioned where this one is."""
        clone = PrimeIterator.__new__(PrimeIterator)
        clone._flags = self._flags
        clone._estimate_pi = self._estimate_pi
        clone._two = self._two
        clone._front = self._front
        clone._back = self._back
        return clone

    __copy__ = copy

    def size_hint(self) -> Tuple[int, int]:
        """
        Return (lower, upper) bounds on the number of primes remaining.

        The bounds come from pi(n) estimates at the first and last remaining
        primes, so they cost two peeks rather than a full count.
        """
        peek = self.copy()
        lo = next(peek, None)
        if lo is None:
            return (0, 0)
        try:
            hi = peek.next_back()
        except StopIteration:
            return (1, 1)

        below_hi, above_hi = self._estimate_pi(hi)
        below_lo, above_lo = self._estimate_pi(lo)
        return (below_hi - min(above_lo, below_hi), above_hi - below_lo + 1)

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    def __repr__(self) -> str:
        return (f"PrimeIterator(two={self._two}, front={self._front}, "
                f"back={self._back})")
