import random

import pytest

from dsakit.heapsort import heapsort, percolate_down


def test_source_array():
    values = [12, 11, 13, 5, 6, 7]
    heapsort(values)
    assert values == [5, 6, 7, 11, 12, 13]


@pytest.mark.parametrize("seed", range(10))
def test_random_with_duplicates(seed):
    rng = random.Random(seed)
    values = [rng.randint(1, 9) for _ in range(13)]
    expected = sorted(values)
    heapsort(values)
    assert values == expected


def test_empty_and_single():
    empty: list[int] = []
    heapsort(empty)
    assert empty == []
    single = [4]
    heapsort(single)
    assert single == [4]


def test_percolate_down_swaps_with_larger_child():
    values = [1, 5, 3]
    percolate_down(values, 3, 0)
    assert values == [5, 1, 3]


def test_percolate_down_respects_size():
    values = [1, 5, 3]
    percolate_down(values, 1, 0)
    assert values == [1, 5, 3]


def test_percolate_down_builds_heap_property():
    values = [2, 9, 8, 7, 6, 5, 4]
    percolate_down(values, len(values), 0)
    for index in range(len(values)):
        for child in (2 * index + 1, 2 * index + 2):
            if child < len(values):
                assert values[index] >= values[child]