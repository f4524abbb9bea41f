"""A binary search tree implementing a set of comparable keys."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class _Node:
    __slots__ = ("key", "left", "right")

    def __init__(self, key: Any) -> None:
        self.key = key
        self.left: _Node | None = None
        self.right: _Node | None = None


def _copy(node: _Node | None) -> _Node | None:
    if node is None:
        return None
    duplicate = _Node(node.key)
    duplicate.left = _copy(node.left)
    duplicate.right = _copy(node.right)
    return duplicate


def _insert(node: _Node | None, key: Any) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    return node


def _contains(node: _Node | None, key: Any) -> bool:
    if node is None:
        return False
    if node.key == key:
        return True
    return _contains(node.left if key < node.key else node.right, key)


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _remove(node: _Node | None, key: Any) -> _Node | None:
    if node is None:
        return None
    if key == node.key:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = _min_node(node.right)
        node.key = successor.key
        node.right = _remove(node.right, successor.key)
    elif key < node.key:
        node.left = _remove(node.left, key)
    else:
        node.right = _remove(node.right, key)
    return node


def _in_order(node: _Node | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _in_order(node.left)
    yield node.key
    yield from _in_order(node.right)


class BinarySearchTree:
    """An unbalanced binary search tree; duplicate keys are ignored."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Add key to the tree."""
        self._root = _insert(self._root, key)

    def contains(self, key: Any) -> bool:
        """Return True when key is in the tree."""
        return _contains(self._root, key)

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def remove(self, key: Any) -> None:
        """Remove key if present."""
        self._root = _remove(self._root, key)

    def in_order_traversal(self) -> list[Any]:
        """Return the keys in ascending order, walking recursively."""
        return list(_in_order(self._root))

    def in_order_traversal_iterative(self) -> list[Any]:
        """Return the keys in ascending order, walking with an explicit stack."""
        result: list[Any] = []
        stack: list[_Node] = []
        current = self._root
        while current is not None or stack:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            result.append(current.key)
            current = current.right
        return result

    def __iter__(self) -> Iterator[Any]:
        return _in_order(self._root)

    def copy(self) -> BinarySearchTree:
        """Return a deep copy with the same shape."""
        duplicate = BinarySearchTree()
        duplicate._root = _copy(self._root)
        return duplicate