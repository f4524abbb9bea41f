"""A singly-linked list that sorts itself by insertion sort or merge sort."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: _Node | None = None) -> None:
        self.value = value
        self.next = next_node


def _split_middle(head: _Node) -> _Node | None:
    """Cut the chain after its middle and return the head of the second half."""
    slow = head
    fast = head.next
    while fast is not None:
        fast = fast.next
        if fast is None:
            break
        fast = fast.next
        slow = slow.next
    second = slow.next
    slow.next = None
    return second


def _sorted_merge(first: _Node | None, second: _Node | None) -> _Node | None:
    """Merge two sorted chains, taking from the first on ties."""
    anchor = _Node(None)
    tail = anchor
    while first is not None and second is not None:
        if first.value <= second.value:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def _merge_sort(head: _Node | None) -> _Node | None:
    if head is None or head.next is None:
        return head
    middle = _split_middle(head)
    return _sorted_merge(_merge_sort(head), _merge_sort(middle))


class LinkedList:
    """A head-only singly-linked list of comparable values."""

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        self._head: _Node | None = None
        if values is not None:
            for value in values:
                self.append(value)

    def _nodes(self) -> Iterator[_Node]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def reset(self) -> None:
        """Remove every value."""
        self._head = None

    def is_empty(self) -> bool:
        """Return True when the list holds nothing."""
        return self._head is None

    def append(self, value: Any) -> None:
        """Add value at the end, walking from the head."""
        node = _Node(value)
        if self._head is None:
            self._head = node
            return
        current = self._head
        while current.next is not None:
            current = current.next
        current.next = node

    def _sorted_insert(self, node: _Node) -> None:
        if self._head is None or node.value <= self._head.value:
            node.next = self._head
            self._head = node
            return
        current = self._head
        while current.next is not None and current.next.value < node.value:
            current = current.next
        node.next = current.next
        current.next = node

    def insertion_sort(self) -> None:
        """Sort by moving each node into a new sorted chain."""
        current = self._head
        self._head = None
        while current is not None:
            following = current.next
            current.next = None
            self._sorted_insert(current)
            current = following

    def merge_sort(self) -> None:
        """Sort by recursive splitting and merging of the chain."""
        self._head = _merge_sort(self._head)

    def to_list(self) -> list[Any]:
        """Return the values in list order."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)