"""A set of values kept in insertion order in a plain list."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class ArraySet:
    """A set backed by a list; removal moves the last value into the gap."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._storage: list[Any] = []
        for value in values:
            self.add(value)

    def add(self, value: Any) -> None:
        """Add value unless it is already present."""
        if value not in self._storage:
            self._storage.append(value)

    def remove(self, value: Any) -> None:
        """Remove value if present, filling its slot with the last value."""
        try:
            index = self._storage.index(value)
        except ValueError:
            return
        last = self._storage.pop()
        if index < len(self._storage):
            self._storage[index] = last

    def __contains__(self, value: Any) -> bool:
        return value in self._storage

    def intersect(self, other: ArraySet) -> ArraySet:
        """Return the values present in both sets, in this set's order."""
        return ArraySet(value for value in self._storage if value in other)

    def union(self, other: ArraySet) -> ArraySet:
        """Return this set's values followed by the other's new values."""
        result = ArraySet(self._storage)
        for value in other:
            result.add(value)
        return result

    def difference(self, other: ArraySet) -> ArraySet:
        """Return the values of this set that are not in other."""
        return ArraySet(value for value in self._storage if value not in other)

    def __len__(self) -> int:
        return len(self._storage)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._storage)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self._storage)