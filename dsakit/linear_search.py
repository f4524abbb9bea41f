"""Linear searches and selection sort."""

from __future__ import annotations

from typing import Any, MutableSequence, Sequence


def search(values: Sequence[Any], target: Any) -> int:
    """Return the index of the first match, or -1."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return -1


def search_last_match(values: Sequence[Any], target: Any) -> int:
    """Scan the whole sequence and return the index of the last match, or -1."""
    found = -1
    for index, value in enumerate(values):
        if value == target:
            found = index
    return found


def selection_sort(values: MutableSequence[Any]) -> None:
    """Sort values in place in ascending order using selection sort."""
    size = len(values)
    for i in range(size - 1):
        smallest = min(range(i, size), key=values.__getitem__)
        if smallest != i:
            values[i], values[smallest] = values[smallest], values[i]