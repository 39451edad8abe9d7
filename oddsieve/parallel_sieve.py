"""
Parallel segmented odd-only sieve.

Uses multiprocessing to split the odd index range across CPU cores. Each
segment is cleared with the base primes up to sqrt(upper bound), so the
concatenated result is identical to ``odd_prime_flags``.
"""

import math
from multiprocessing import Pool, cpu_count
from typing import List, Optional, Tuple

import numpy as np

from .sieve import (
    MIN_LIMIT,
    clear_multiples,
    index_to_n,
    n_to_index,
    odd_primes_upto,
)

DEFAULT_MIN_SEGMENT = 10**6


def _process_segment(args: Tuple[int, int, List[int]]) -> np.ndarray:
    """
    Process a single segment: flags for odd-only indices [start, end).

    Returns the segment's flags, True meaning prime.
    """
    start, end, base_primes = args
    flags = np.ones(end - start, dtype=bool)

    if start == 0:
        flags[0] = False  # 1 isn't prime

    for p in base_primes:
        if n_to_index(p * p) >= end:
            break
        clear_multiples(flags, p, offset=start)

    return flags


def odd_prime_flags_parallel(limit: int, num_workers: Optional[int] = None,
                             segment_size: Optional[int] = None,
                             verbose: bool = False) -> np.ndarray:
    """
    Compute odd-only prime flags using a parallel segmented sieve.

    Parameters
    ----------
    limit : int
        Requested bound, clamped up to MIN_LIMIT like ``odd_prime_flags``.
    num_workers : int, optional
        Number of parallel workers. Defaults to CPU count. With 1 the
        segments are processed in this process.
    segment_size : int, optional
        Odd-only indices per segment. Defaults to about 100 segments per
        worker, at least DEFAULT_MIN_SEGMENT.
    verbose : bool
        Print progress.

    Returns
    -------
    np.ndarray
        Boolean array equal to ``odd_prime_flags(limit)``.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    if num_workers is None:
        num_workers = cpu_count()
    if num_workers < 1:
        raise ValueError(f"num_workers must be positive, got {num_workers}")

    limit = max(MIN_LIMIT, limit)
    size = (limit + 1) // 2

    # Step 1: base primes up to sqrt of the largest stored number
    root = math.isqrt(index_to_n(size - 1))
    base_primes = [int(p) for p in odd_primes_upto(root)]

    if verbose:
        print(f"    Found {len(base_primes)} odd base primes up to {root}")

    # Step 2: segments over the odd index range
    if segment_size is None:
        segment_size = max(DEFAULT_MIN_SEGMENT, size // (num_workers * 100))
    if segment_size < 1:
        raise ValueError(f"segment_size must be positive, got {segment_size}")

    segments = []
    for start in range(0, size, segment_size):
        end = min(start + segment_size, size)
        segments.append((start, end, base_primes))

    if verbose:
        print(f"    Processing {len(segments)} segments with {num_workers} workers...")

    # Step 3: process segments
    if num_workers == 1:
        results = [_process_segment(segment) for segment in segments]
    else:
        with Pool(num_workers) as pool:
            results = pool.map(_process_segment, segments)

    # Step 4: concatenate results
    return np.concatenate(results)
