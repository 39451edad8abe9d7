"""
Bounds on the prime-counting function pi(n).

Responsibility: estimation only. Nothing here knows about sieves.

Bounds used (x = n, L = ln x):
- pi(x) >  x / L                  for x >= 17   (Rosser 1962)
- pi(x) >= x / L * (1 + 1 / L)    for x >= 599  (Dusart 1999)
- pi(x) <= x / L * (1 + 1.2762/L) for x > 1     (Dusart 1999)

Below 17 the count is taken exactly from a table.
"""

import math
from bisect import bisect_right
from fractions import Fraction
from typing import Tuple

SMALL_PRIMES = [2, 3, 5, 7, 11, 13]

ROSSER_THRESHOLD = 17
DUSART_LOWER_THRESHOLD = 599
DUSART_UPPER_COEFFICIENT = Fraction("1.2762")


def estimate_pi(n: int) -> Tuple[int, int]:
    """
    Return (lower, upper) with lower <= pi(n) <= upper.

    Parameters
    ----------
    n : int
        Any integer, of any size. Negative values count no primes.

    Returns
    -------
    tuple
        Integer bounds on the number of primes <= n.
    """
    if n < 2:
        return (0, 0)
    if n < ROSSER_THRESHOLD:
        exact = bisect_right(SMALL_PRIMES, n)
        return (exact, exact)

    # Rational arithmetic past the log, so n beyond float range still works.
    n = int(n)
    log_n = Fraction(math.log(n))
    base = n / log_n
    if n >= DUSART_LOWER_THRESHOLD:
        lower = math.floor(base * (1 + 1 / log_n))
    else:
        lower = math.floor(base)
    upper = math.ceil(base * (1 + DUSART_UPPER_COEFFICIENT / log_n))
    return (lower, upper)
