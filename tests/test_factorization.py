"""
Tests for factorization against a sieve, including the completeness
boundary at upper_bound^2 and the shape of incomplete results.
"""

import pytest

from oddsieve.factorization import Complete, Incomplete, factor_product, trial_factor
from oddsieve.primes import sieve


class TestFactor:

    @pytest.mark.parametrize("n, expected", [
        (1, []),
        (2, [(2, 1)]),
        (3, [(3, 1)]),
        (4, [(2, 2)]),
        (5, [(5, 1)]),
        (6, [(2, 1), (3, 1)]),
        (7, [(7, 1)]),
        (8, [(2, 3)]),
        (9, [(3, 2)]),
        (10, [(2, 1), (5, 1)]),
        (2**5 * 3**5, [(2, 5), (3, 5)]),
        (2 * 3 * 5 * 7 * 11 * 13 * 17 * 19,
         [(2, 1), (3, 1), (5, 1), (7, 1), (11, 1), (13, 1), (17, 1), (19, 1)]),
        # a factor larger than any stored in the sieve
        (7561, [(7561, 1)]),
        (2 * 7561, [(2, 1), (7561, 1)]),
        (4 * 5 * 7561, [(2, 2), (5, 1), (7561, 1)]),
        (2 * 997, [(2, 1), (997, 1)]),
    ])
    def test_known_factorizations(self, n, expected):
        """Factorizations from a sieve up to 1000, including inferred large primes."""
        result = sieve(1000).factor(n)
        assert result == Complete(expected)
        assert result.ok

    def test_round_trip_below_boundary(self):
        """Everything below upper_bound^2 factors completely and multiplies back."""
        primes = sieve(30)
        bound = primes.upper_bound() ** 2
        for n in range(1, bound):
            result = primes.factor(n)
            assert result.ok, f"factor({n}) incomplete: {result}"
            assert factor_product(result.factors) == n
            ps = [p for p, _ in result.factors]
            assert ps == sorted(set(ps)), f"primes not increasing for {n}"
            assert all(e >= 1 for _, e in result.factors)

    def test_large_input_beyond_machine_words(self):
        """Inputs above 2^64 are handled by Python ints."""
        primes = sieve(1000)
        n = 2**70 * 3**3 * 991
        assert primes.factor(n) == Complete([(2, 70), (3, 3), (991, 1)])

    def test_negative_rejected(self):
        """Negative numbers have no factorization here."""
        with pytest.raises(ValueError):
            sieve(30).factor(-4)


class TestFactorFailures:

    def test_zero(self):
        """Zero gives the (0, []) sentinel."""
        assert sieve(30).factor(0) == Incomplete(0, [])
        assert not sieve(30).factor(0).ok

    def test_only_one_large_factor(self):
        """Two prime factors above the bound cannot be separated."""
        primes = sieve(30)
        assert primes.factor(31 * 31) == Incomplete(31 * 31, [])
        assert primes.factor(2 * 3 * 31 * 31) == Incomplete(31 * 31, [(2, 1), (3, 1)])

    def test_prime_too_large(self):
        """Prime bigger than 29*29."""
        primes = sieve(30)
        assert primes.factor(7561) == Incomplete(7561, [])
        assert primes.factor(2 * 3 * 7561) == Incomplete(7561, [(2, 1), (3, 1)])

    def test_leftover_times_partial_is_input(self):
        """leftover * product(partial) == n for every incomplete result."""
        primes = sieve(30)
        for n in range(842, 5000):
            result = primes.factor(n)
            if not result.ok:
                assert result.leftover > 1
                assert result.leftover * factor_product(result.factors) == n


class TestFactorCompare:

    def test_agrees_with_larger_sieve_below_boundary(self):
        """Every number <= bound^2 always has a factor <= bound."""
        short = sieve(30)
        long = sieve(10000)
        short_lim = short.upper_bound() ** 2 + 1

        for n in range(short_lim):
            assert short.factor(n) == long.factor(n), f"mismatch at {n}"

    def test_larger_numbers_sometimes_factor(self):
        """Above the boundary, results are the larger sieve's split at the first unreachable factor."""
        short = sieve(30)
        long = sieve(10000)
        bound = short.upper_bound()
        short_lim = bound * bound + 1

        for n in range(short_lim, 10000):
            real = long.factor(n)
            assert real.ok
            expected = Complete(real.factors)

            seen_large = None
            for idx, (p, e) in enumerate(real.factors):
                if p >= short_lim:
                    cut = idx
                elif p > bound:
                    if seen_large is not None:
                        cut = seen_large
                    elif e > 1:
                        cut = idx
                    else:
                        # one factor in (bound, bound^2] can be inferred
                        seen_large = idx
                        continue
                else:
                    continue

                low, high = real.factors[:cut], real.factors[cut:]
                expected = Incomplete(factor_product(high), low)
                break

            assert short.factor(n) == expected, f"n={n}"


class TestTrialFactor:

    def test_accepts_any_prime_iterable(self):
        assert trial_factor(360, [2, 3, 5, 7], 7) == Complete([(2, 3), (3, 2), (5, 1)])

    def test_inferred_prime(self):
        """A leftover <= bound^2 is taken as prime; a larger one is not."""
        # 43 is not in the list but 43 <= 7*7
        assert trial_factor(2 * 43, [2, 3, 5, 7], 7) == Complete([(2, 1), (43, 1)])
        assert trial_factor(2 * 53, [2, 3, 5, 7], 7) == Incomplete(53, [(2, 1)])

    def test_factor_product_empty(self):
        assert factor_product([]) == 1


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
