"""A hash map over integer keys using open addressing with linear probing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

_DEFAULT_CAPACITY = 101


class _State(Enum):
    NEVER_USED = auto()
    OCCUPIED = auto()
    REMOVED = auto()


@dataclass
class _Bucket:
    key: int = 0
    value: int = 0
    state: _State = _State.NEVER_USED

    @property
    def is_empty(self) -> bool:
        return self.state is not _State.OCCUPIED

    @property
    def never_used(self) -> bool:
        return self.state is _State.NEVER_USED

    def set(self, key: int, value: int) -> None:
        self.key = key
        self.value = value
        self.state = _State.OCCUPIED

    def clear(self) -> None:
        self.key = 0
        self.value = 0
        self.state = _State.REMOVED


class HashMap:
    """A fixed-capacity map from non-negative ints to ints with linear probing."""

    def __init__(self, capacity: int = _DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._size = 0
        self._buckets = [_Bucket() for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        return self._capacity

    def _hash(self, key: int) -> int:
        return key % self._capacity

    def _probe_sequence(self, key: int):
        start = self._hash(key)
        for probed in range(self._capacity):
            yield self._buckets[(start + probed) % self._capacity]

    def _find(self, key: int) -> _Bucket | None:
        for bucket in self._probe_sequence(key):
            if bucket.never_used:
                return None
            if not bucket.is_empty and bucket.key == key:
                return bucket
        return None

    def put(self, key: int, value: int) -> bool:
        """Insert a new key; return False if the table is full or the key exists."""
        if self._size == self._capacity:
            return False
        if self._find(key) is not None:
            return False
        for bucket in self._probe_sequence(key):
            if bucket.is_empty:
                bucket.set(key, value)
                self._size += 1
                return True
        return False

    def remove(self, key: int) -> bool:
        """Remove key; return False if it is not present."""
        if self._size == 0:
            return False
        bucket = self._find(key)
        if bucket is None:
            return False
        bucket.clear()
        self._size -= 1
        return True

    def get(self, key: int) -> int | None:
        """Return the value stored for key, or None when it is absent."""
        bucket = self._find(key)
        return None if bucket is None else bucket.value

    def resize(self, new_capacity: int) -> None:
        """Grow the table to new_capacity and rehash; smaller sizes are ignored."""
        if new_capacity <= self._capacity:
            return
        entries = [(b.key, b.value) for b in self._buckets if not b.is_empty]
        self._capacity = new_capacity
        self._size = 0
        self._buckets = [_Bucket() for _ in range(new_capacity)]
        for key, value in entries:
            self.put(key, value)

    def __len__(self) -> int:
        return self._size

    def copy(self) -> HashMap:
        """Return an independent copy with the same layout."""
        duplicate = HashMap(self._capacity)
        duplicate._size = self._size
        duplicate._buckets = [
            _Bucket(b.key, b.value, b.state) for b in self._buckets
        ]
        return duplicate