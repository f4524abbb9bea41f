"""Heapsort over a mutable sequence using a max heap."""

from __future__ import annotations

from typing import Any, MutableSequence


def percolate_down(values: MutableSequence[Any], size: int, root: int) -> None:
    """Sift values[root] down within the first size items to restore a max heap."""
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == root:
            return
        values[root], values[largest] = values[largest], values[root]
        root = largest


def heapsort(values: MutableSequence[Any]) -> None:
    """Sort values in place in ascending order."""
    size = len(values)
    for index in range(size // 2 - 1, -1, -1):
        percolate_down(values, size, index)
    for end in range(size - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        percolate_down(values, end, 0)