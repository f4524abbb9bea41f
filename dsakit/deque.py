"""A double-ended queue built on a doubly-linked list."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: T) -> None:
        self.value = value
        self.next: _Node[T] | None = None
        self.prev: _Node[T] | None = None


class Deque(Generic[T]):
    """A deque offering both queue and stack operations at either end."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._count = 0
        for value in values:
            self.enqueue_back(value)

    def is_empty(self) -> bool:
        """Return True when the deque holds nothing."""
        return self._count == 0

    def clear(self) -> None:
        """Remove every value."""
        self._head = None
        self._tail = None
        self._count = 0

    def enqueue_front(self, value: T) -> None:
        """Add value at the front."""
        node = _Node(value)
        if self._head is None:
            self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
        self._head = node
        self._count += 1

    def enqueue_back(self, value: T) -> None:
        """Add value at the back."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            node.prev = self._tail
            self._tail.next = node
        self._tail = node
        self._count += 1

    def dequeue_front(self) -> T:
        """Remove and return the front value."""
        if self._head is None:
            raise IndexError("deque is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._count -= 1
        return node.value

    def dequeue_back(self) -> T:
        """Remove and return the back value."""
        if self._tail is None:
            raise IndexError("deque is empty")
        node = self._tail
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._count -= 1
        return node.value

    def front(self) -> T:
        """Return the front value without removing it."""
        if self._head is None:
            raise IndexError("deque is empty")
        return self._head.value

    def back(self) -> T:
        """Return the back value without removing it."""
        if self._tail is None:
            raise IndexError("deque is empty")
        return self._tail.value

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def copy(self) -> Deque[T]:
        """Return an independent copy with the same values in order."""
        return Deque(self)