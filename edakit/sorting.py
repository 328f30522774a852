"""In-place sorting, selection of the k-th smallest value and array helpers."""

from __future__ import annotations

import random
from typing import Any, MutableSequence


def _source(rng: random.Random | None) -> Any:
    return random if rng is None else rng


def random_int(low: int, high: int, rng: random.Random | None = None) -> int:
    """Random integer between low and high, both inclusive."""
    fraction = _source(rng).random()
    return int(fraction * (high - low) + low + 0.5)


def random_array(n: int, rng: random.Random | None = None) -> list[float]:
    """n random floats in [0, 1)."""
    source = _source(rng)
    return [source.random() for _ in range(n)]


def random_int_array(
    n: int,
    min_value: int = 0,
    max_value: int = 100,
    rng: random.Random | None = None,
) -> list[float]:
    """n random whole numbers in [min_value, max_value], stored as floats."""
    return [float(random_int(min_value, max_value, rng)) for _ in range(n)]


def linspace(maximum: int, parts: int) -> list[int]:
    """Multiples of maximum/parts (truncated) from one part up to parts."""
    step = abs(maximum) // abs(parts)
    if (maximum < 0) != (parts < 0):
        step = -step
    return [step * i for i in range(1, parts + 1)]


def selection_sort(values: MutableSequence[float]) -> None:
    """Sort values in place by repeated selection of the smallest."""
    n = len(values)
    for i in range(n - 1):
        smallest = min(range(i, n), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]


def split(
    values: MutableSequence[float], i: int, j: int, rng: random.Random | None = None
) -> int:
    """Partition values[i..j] around a random pivot; return the pivot's index."""
    p = random_int(i, j, rng)
    while i < j:
        while i < p and values[i] <= values[p]:
            i += 1
        while j > p and values[j] >= values[p]:
            j -= 1
        values[i], values[j] = values[j], values[i]
        if i == p:
            p = j
        elif j == p:
            p = i
    return p


def _quick_sort(values: MutableSequence[float], i: int, j: int, rng) -> None:
    if i < j:
        k = split(values, i, j, rng)
        _quick_sort(values, i, k - 1, rng)
        _quick_sort(values, k + 1, j, rng)


def quick_sort(values: MutableSequence[float], rng: random.Random | None = None) -> None:
    """Sort values in place with randomised quicksort."""
    _quick_sort(values, 0, len(values) - 1, rng)


def k_smallest(
    values: MutableSequence[float], k: int, rng: random.Random | None = None
) -> int:
    """Return the value of rank k (0-based), truncated to an int.

    The sequence is partially reordered. Raises IndexError for k out of range.
    """
    if not 0 <= k < len(values):
        raise IndexError(f"rank {k} out of range for {len(values)} values")
    low, high = 0, len(values) - 1
    while True:
        p = split(values, low, high, rng)
        if k == p:
            return int(values[p])
        if k < p:
            high = p - 1
        else:
            low = p + 1