"""A list ADT built on a singly-linked chain of nodes with head and tail."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """A node holding one value and a link to the next node."""

    value: T
    next: Node[T] | None = None


class SinglyLinkedList(Generic[T]):
    """A singly-linked list that keeps references to its head and tail."""

    def __init__(self, values: Iterable[T] | None = None) -> None:
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        if values is not None:
            for value in values:
                self._append_node(Node(value))

    @property
    def head(self) -> Node[T] | None:
        return self._head

    @property
    def tail(self) -> Node[T] | None:
        return self._tail

    def _append_node(self, node: Node[T]) -> None:
        node.next = None
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node

    def _nodes(self) -> Iterator[Node[T]]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def prepend(self, node: Node[T]) -> None:
        """Insert node at the front of the list."""
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node

    def insert_after(self, node: Node[T], new_node: Node[T]) -> None:
        """Insert new_node directly after node, which must be in the list."""
        new_node.next = node.next
        node.next = new_node
        if node is self._tail:
            self._tail = new_node

    def remove(self, node: Node[T]) -> None:
        """Unlink node from the list; raise ValueError if it is not present."""
        previous: Node[T] | None = None
        if self._head is None:
            raise ValueError("remove from empty list")
        if node is self._head:
            self._head = node.next
        else:
            previous = self._head
            while previous.next is not node:
                if previous.next is None:
                    raise ValueError("node not in list")
                previous = previous.next
            previous.next = node.next
        if node is self._tail:
            self._tail = previous
        node.next = None

    def search(self, value: T) -> Node[T] | None:
        """Return the first node holding value, or None."""
        return next((node for node in self._nodes() if node.value == value), None)

    def is_empty(self) -> bool:
        """Return True when the list has no nodes."""
        return self._head is None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self._nodes())

    def at(self, index: int) -> Node[T] | None:
        """Return the node at index, or None when index is past the end."""
        if index < 0:
            raise IndexError("index must be non-negative")
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        return None

    def copy(self) -> SinglyLinkedList[T]:
        """Return a deep copy with fresh nodes holding the same values."""
        return SinglyLinkedList(self)