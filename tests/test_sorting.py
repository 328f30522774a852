import random

import pytest

from edakit.sorting import (
    k_smallest,
    linspace,
    quick_sort,
    random_array,
    random_int,
    random_int_array,
    selection_sort,
    split,
)


class _Fixed:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_k_smallest_source_case():
    rng = random.Random(7)
    values = random_int_array(10, 0, 100, rng)
    expected = int(sorted(values)[2])
    assert k_smallest(values, 2, rng) == expected


@pytest.mark.parametrize("k", range(8))
def test_k_smallest_every_rank(k):
    values = [5.0, 1.0, 9.0, 3.0, 3.0, 7.0, 0.0, 2.0]
    assert k_smallest(list(values), k, random.Random(k)) == int(sorted(values)[k])


def test_k_smallest_truncates_to_int():
    assert k_smallest([3.7], 0, random.Random(1)) == 3


@pytest.mark.parametrize("k", [-1, 3])
def test_k_smallest_out_of_range(k):
    with pytest.raises(IndexError):
        k_smallest([1.0, 2.0, 3.0], k)


def test_selection_sort():
    values = [4.0, -1.0, 3.5, 3.5, 0.0, 10.0]
    selection_sort(values)
    assert values == [-1.0, 0.0, 3.5, 3.5, 4.0, 10.0]


@pytest.mark.parametrize("seed", range(5))
def test_quick_sort_matches_sorted(seed):
    rng = random.Random(seed)
    values = random_int_array(50, 0, 20, rng)
    expected = sorted(values)
    quick_sort(values, rng)
    assert values == expected


def test_quick_sort_empty_and_single():
    empty = []
    quick_sort(empty)
    assert empty == []
    single = [2.0]
    quick_sort(single)
    assert single == [2.0]


@pytest.mark.parametrize("seed", range(5))
def test_split_partitions(seed):
    rng = random.Random(seed)
    values = random_int_array(20, 0, 9, rng)
    original = sorted(values)
    p = split(values, 0, len(values) - 1, rng)
    pivot = values[p]
    assert all(v <= pivot for v in values[:p])
    assert all(v >= pivot for v in values[p + 1 :])
    assert sorted(values) == original


def test_random_int_bounds_with_fixed_source():
    assert random_int(0, 100, _Fixed(0.0)) == 0
    assert random_int(0, 100, _Fixed(1.0)) == 100
    assert random_int(0, 100, _Fixed(0.5)) == 50


def test_random_int_stays_in_range():
    rng = random.Random(3)
    results = {random_int(2, 5, rng) for _ in range(500)}
    assert results <= {2, 3, 4, 5}
    assert results == {2, 3, 4, 5}


def test_random_array_in_unit_interval():
    values = random_array(100, random.Random(11))
    assert len(values) == 100
    assert all(0.0 <= v < 1.0 for v in values)


def test_random_int_array_defaults():
    values = random_int_array(200, rng=random.Random(5))
    assert len(values) == 200
    assert all(0 <= v <= 100 and v == int(v) for v in values)


def test_linspace():
    assert linspace(100000, 10) == [10000 * i for i in range(1, 11)]
    assert linspace(10, 3) == [3, 6, 9]


def test_linspace_zero_parts():
    with pytest.raises(ZeroDivisionError):
        linspace(10, 0)