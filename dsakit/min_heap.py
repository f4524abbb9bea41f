"""A binary min heap and a priority queue built on it."""

from __future__ import annotations

from typing import Any, Iterable


class MinHeap:
    """A binary min heap stored in a list."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.add(value)

    def _percolate_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[index] >= items[parent]:
                return
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _percolate_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            child = 2 * index + 1
            if child >= size:
                return
            children = [c for c in (child, child + 1) if c < size]
            smallest = min(children, key=items.__getitem__)
            if not items[smallest] < items[index]:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def add(self, value: Any) -> None:
        """Insert value into the heap."""
        self._items.append(value)
        self._percolate_up(len(self._items) - 1)

    def remove(self) -> Any:
        """Remove and return the smallest value."""
        if not self._items:
            raise IndexError("remove from empty heap")
        smallest = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._percolate_down(0)
        return smallest

    def peek(self) -> Any:
        """Return the smallest value without removing it."""
        if not self._items:
            raise IndexError("peek at empty heap")
        return self._items[0]

    def is_empty(self) -> bool:
        """Return True when the heap holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def copy(self) -> MinHeap:
        """Return an independent copy."""
        duplicate = MinHeap()
        duplicate._items = list(self._items)
        return duplicate


class PriorityQueue:
    """A min priority queue backed by a MinHeap."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._heap = MinHeap(values)

    def enqueue(self, value: Any) -> None:
        """Add value to the queue."""
        self._heap.add(value)

    def dequeue(self) -> Any:
        """Remove and return the smallest value."""
        return self._heap.remove()

    def peek(self) -> Any:
        """Return the smallest value without removing it."""
        return self._heap.peek()

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return self._heap.is_empty()

    def __len__(self) -> int:
        return len(self._heap)

    def copy(self) -> PriorityQueue:
        """Return an independent copy."""
        duplicate = PriorityQueue()
        duplicate._heap = self._heap.copy()
        return duplicate