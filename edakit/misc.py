"""Primality test and maximum subsequence sum in three complexities."""

from __future__ import annotations

import math
from typing import Iterable, Sequence


def is_prime(n: int) -> bool:
    """Trial division up to the rounded square root; 0 and 1 count as prime."""
    limit = int(math.sqrt(n) + 0.5)
    return all(n % i != 0 for i in range(2, limit + 1))


def format_array(values: Iterable[int]) -> str:
    """Join values with single spaces."""
    return " ".join(str(value) for value in values)


def mss_cubic(values: Sequence[int]) -> tuple[int, int, int]:
    """Maximum subsequence sum by trying every pair of ends.

    Returns (start, end, total); an empty range counts as sum 0.
    """
    best, best_i, best_j = -1, 0, 0
    n = len(values)
    for i in range(n):
        for j in range(n):
            total = sum(values[i : j + 1])
            if total > best:
                best, best_i, best_j = total, i, j
    return best_i, best_j, best


def mss_quadratic(values: Sequence[int]) -> tuple[int, int, int]:
    """Maximum subsequence sum with running sums from each start."""
    best, best_i, best_j = -1, 0, 0
    for i in range(len(values)):
        total = 0
        for j, value in enumerate(values[i:], start=i):
            total += value
            if total > best:
                best, best_i, best_j = total, i, j
    return best_i, best_j, best


def mss_linear(values: Sequence[int]) -> tuple[int, int, int]:
    """Maximum subsequence sum in one pass."""
    best, best_i, best_j = -1, 0, 0
    total = 0
    start = 0
    for i, value in enumerate(values):
        total += value
        if total > best:
            best, best_i, best_j = total, start, i
        if total < 0:
            start = i + 1
            total = 0
    return best_i, best_j, best