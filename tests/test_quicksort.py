import random

import pytest

from dsakit.quicksort import quicksort

SIZE = 11
MAX_VAL = 9


def _unsorted_values(seed):
    rng = random.Random(seed)
    while True:
        values = [rng.randint(1, MAX_VAL) for _ in range(SIZE)]
        if values != sorted(values):
            return values


@pytest.mark.parametrize("seed", range(10))
def test_random_runs_are_sorted(seed):
    values = _unsorted_values(seed)
    expected = sorted(values)
    quicksort(values)
    assert values == expected


@pytest.mark.parametrize(
    "values",
    [[], [1], [2, 1], [1, 1, 1, 1], [5, 4, 3, 2, 1], [1, 2, 3, 4, 5]],
)
def test_edge_cases(values):
    expected = sorted(values)
    quicksort(values)
    assert values == expected


def test_large_input_with_duplicates():
    rng = random.Random(42)
    values = [rng.randint(-50, 50) for _ in range(2000)]
    expected = sorted(values)
    quicksort(values)
    assert values == expected


def test_returns_none_and_sorts_in_place():
    values = [3, 1, 2]
    assert quicksort(values) is None
    assert values == [1, 2, 3]


def test_strings():
    values = ["pear", "apple", "fig"]
    quicksort(values)
    assert values == ["apple", "fig", "pear"]