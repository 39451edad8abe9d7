#!/usr/bin/env python3
"""
Verify the odd-only prime store against independent ground truth.

Checks, for every configured limit:
1. is_prime against trial division over 0..upper_bound
2. Forward iteration against reversed backward iteration
3. size_hint brackets the true remaining count
4. factor() round trips below upper_bound^2 and agrees with a larger sieve
5. Parallel construction gives identical flags

Usage:
    python verify_sieve.py
    python verify_sieve.py --config config/custom.yaml --limits 50 500
"""

import argparse
import sys
import time

import numpy as np
import pandas as pd
import yaml

from oddsieve.factorization import factor_product
from oddsieve.primes import sieve, sieve_parallel


def trial_division_is_prime(n: int) -> bool:
    """Ground truth primality by trial division."""
    if n < 2:
        return False
    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1
    return True


def verify_is_prime(primes) -> int:
    errors = 0
    for n in range(primes.upper_bound() + 1):
        if primes.is_prime(n) != trial_division_is_prime(n):
            errors += 1
            if errors <= 5:
                print(f"    MISMATCH is_prime({n})")
    return errors


def verify_iteration(primes) -> int:
    forward = list(primes.primes())
    backward = list(reversed(primes.primes()))
    return 0 if forward == backward[::-1] else 1


def verify_size_hint(primes, steps: int) -> int:
    errors = 0
    iterator = primes.primes()
    for _ in range(steps):
        lo, hi = iterator.size_hint()
        remaining = sum(1 for _ in iterator.copy())
        if not lo <= remaining <= hi:
            errors += 1
            if errors <= 5:
                print(f"    BAD size_hint {lo} <= {remaining} <= {hi}")
        if next(iterator, None) is None:
            break
    return errors


def verify_factor(primes, larger) -> int:
    errors = 0
    bound = min(primes.upper_bound() ** 2, larger.upper_bound() ** 2)
    # every number below the boundary, capped to keep the run short
    for n in range(1, min(bound, 200000)):
        result = primes.factor(n)
        if (result.ok and factor_product(result.factors) == n
                and result == larger.factor(n)):
            continue
        errors += 1
        if errors <= 5:
            print(f"    FAILED factor({n}) = {result}")
    return errors


def verify_parallel(primes, limit: int, num_workers: int, segment_size: int) -> int:
    parallel = sieve_parallel(limit, num_workers=num_workers,
                              segment_size=segment_size)
    return 0 if np.array_equal(primes.flags, parallel.flags) else 1


def main():
    parser = argparse.ArgumentParser(description='Verify the odd-only prime sieve')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--limits', type=int, nargs='+', default=None,
                        help='Override the configured limits')
    parser.add_argument('--workers', type=int, default=None,
                        help='Override the configured number of workers')
    args = parser.parse_args()

    with open(args.config) as f:
        config = yaml.safe_load(f)

    limits = args.limits or config['limits']
    num_workers = args.workers or config['num_workers']

    print("=" * 60)
    print("Odd-only sieve verification")
    print("=" * 60)
    print(f"  limits = {limits}")
    print(f"  compare_limit = {config['compare_limit']:,}")
    print(f"  num_workers = {num_workers}")
    print()

    larger = sieve(config['compare_limit'])
    rows = []
    for limit in limits:
        start = time.time()
        primes = sieve(limit)
        print(f"  limit={limit:,} upper_bound={primes.upper_bound():,}")
        rows.append({
            'limit': limit,
            'upper_bound': primes.upper_bound(),
            'is_prime_errors': verify_is_prime(primes),
            'iteration_errors': verify_iteration(primes),
            'size_hint_errors': verify_size_hint(primes, config['size_hint_steps']),
            'factor_errors': verify_factor(primes, larger),
            'parallel_errors': verify_parallel(primes, limit, num_workers,
                                               config['segment_size']),
            'seconds': round(time.time() - start, 3),
        })

    df = pd.DataFrame(rows)
    print()
    print(df.to_string(index=False))

    error_columns = [c for c in df.columns if c.endswith('_errors')]
    total_errors = int(df[error_columns].to_numpy().sum())

    print("\n" + "=" * 60)
    if total_errors == 0:
        print("✓ All verifications passed!")
    else:
        print(f"✗ {total_errors} verification errors")
        sys.exit(1)


if __name__ == '__main__':
    main()
