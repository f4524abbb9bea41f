"""In-place quicksort with a middle pivot and Hoare-style partitioning."""

from __future__ import annotations

from typing import Any, MutableSequence


def _partition(values: MutableSequence[Any], low: int, high: int) -> int:
    pivot = values[(low + high) // 2]
    while True:
        while values[low] < pivot:
            low += 1
        while values[high] > pivot:
            high -= 1
        if low >= high:
            return high
        values[low], values[high] = values[high], values[low]
        low += 1
        high -= 1


def quicksort(values: MutableSequence[Any]) -> None:
    """Sort values in place in ascending order."""
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        split = _partition(values, low, high)
        pending.append((split + 1, high))
        pending.append((low, split))