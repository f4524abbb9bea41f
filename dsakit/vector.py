"""A growable array with explicit capacity doubling."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

_DEFAULT_CAPACITY = 10


class Vector(Generic[T]):
    """A sequence whose capacity doubles when it fills up."""

    def __init__(self, size: int | None = None, value: T | None = None) -> None:
        if size is None:
            self._items: list = []
            self._capacity = _DEFAULT_CAPACITY
            return
        if size < 0:
            raise ValueError("size must be non-negative")
        self._items = [value] * size
        self._capacity = 2 * size

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, value: T) -> None:
        """Add a value at the end, growing capacity when full."""
        if len(self._items) == self._capacity:
            self._capacity = max(self._capacity * 2, 1)
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the last value."""
        if not self._items:
            raise IndexError("pop from empty Vector")
        return self._items.pop()

    def back(self) -> T:
        """Return the last value."""
        if not self._items:
            raise IndexError("back of empty Vector")
        return self._items[-1]

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        return index

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[self._check(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[self._check(index)] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def copy(self) -> Vector[T]:
        """Return an independent copy with the same capacity."""
        duplicate: Vector[T] = Vector()
        duplicate._items = list(self._items)
        duplicate._capacity = self._capacity
        return duplicate