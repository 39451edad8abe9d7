"""
Factorization utilities.

Responsibility: trial division against a sieve's primes, with a result
type that keeps incomplete factorizations as ordinary values.
"""

from typing import Iterable, List, NamedTuple, Tuple, Union

Factors = List[Tuple[int, int]]


class Complete(NamedTuple):
    """Full factorization: (prime, exponent) pairs, primes increasing."""
    factors: Factors

    @property
    def ok(self) -> bool:
        return True


class Incomplete(NamedTuple):
    """
    Partial factorization.

    ``leftover`` times the product of ``factors`` is the input. ``leftover``
    is either composed of primes the sieve cannot reach, or 0 for input 0.
    """
    leftover: int
    factors: Factors

    @property
    def ok(self) -> bool:
        return False


Factorization = Union[Complete, Incomplete]


def trial_factor(n: int, primes: Iterable[int], upper_bound: int) -> Factorization:
    """
    Factor n by trial division over primes.

    Parameters
    ----------
    n : int
        Non-negative integer to factor.
    primes : iterable of int
        Every prime <= upper_bound, increasing.
    upper_bound : int
        Bound up to which ``primes`` is complete.

    Returns
    -------
    Complete or Incomplete
        Complete whenever n < upper_bound**2, and beyond that whenever at
        most one prime factor exceeds upper_bound and none exceeds
        upper_bound**2.
    """
    if n < 0:
        raise ValueError(f"cannot factor negative number {n}")
    if n == 0:
        return Incomplete(0, [])

    factors = []
    for p in primes:
        if n == 1:
            break
        if p * p > n:
            # n has no factor <= sqrt(n) left, so it is prime
            break

        count = 0
        while n % p == 0:
            n //= p
            count += 1
        if count > 0:
            factors.append((p, count))

    if n != 1:
        if upper_bound * upper_bound >= n:
            factors.append((n, 1))
        else:
            return Incomplete(n, factors)
    return Complete(factors)


def factor_product(factors: Factors) -> int:
    """Multiply (prime, exponent) pairs back together."""
    product = 1
    for p, e in factors:
        product *= p ** e
    return product
