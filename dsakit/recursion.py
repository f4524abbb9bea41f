"""Recursive searches, comparisons and Fibonacci numbers."""

from __future__ import annotations

from typing import Any, MutableMapping, Sequence


def search_first(values: Sequence[Any], target: Any) -> int:
    """Return the first index of target by checking the head each round, or -1."""

    def helper(start: int) -> int:
        if start >= len(values):
            return -1
        if values[start] == target:
            return start
        return helper(start + 1)

    return helper(0)


def search_last(values: Sequence[Any], target: Any) -> int:
    """Return the last index of target by checking the tail each round, or -1."""

    def helper(size: int) -> int:
        if size == 0:
            return -1
        if values[size - 1] == target:
            return size - 1
        return helper(size - 1)

    return helper(len(values))


def are_equal_arrays(first: Sequence[Any], second: Sequence[Any]) -> bool:
    """Compare two sequences element by element from the tail."""
    if len(first) != len(second):
        return False

    def helper(size: int) -> bool:
        if size == 0:
            return True
        if first[size - 1] != second[size - 1]:
            return False
        return helper(size - 1)

    return helper(len(first))


def are_equal_arrays_from_head(first: Sequence[Any], second: Sequence[Any]) -> bool:
    """Compare two sequences from the head, stopping before the final element."""
    if len(first) != len(second):
        return False

    def helper(left: int, right: int) -> bool:
        if left >= right:
            return True
        if first[left] != second[left]:
            return False
        return helper(left + 1, right)

    return helper(0, len(first) - 1)


def is_palindrome(values: Sequence[Any]) -> bool:
    """Return True when the sequence reads the same both ways."""

    def helper(left: int, right: int) -> bool:
        if left >= right:
            return True
        if values[left] != values[right]:
            return False
        return helper(left + 1, right - 1)

    return helper(0, len(values) - 1)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number by plain recursion."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n < 2:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def fibonacci_memoized(n: int, memory: MutableMapping[int, int] | None = None) -> int:
    """Return the n-th Fibonacci number, caching results in memory."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if memory is None:
        memory = {}
    if n in memory:
        return memory[n]
    if n < 2:
        result = n
    else:
        result = fibonacci_memoized(n - 1, memory) + fibonacci_memoized(n - 2, memory)
    memory[n] = result
    return result


def binary_search(values: Sequence[Any], value: Any) -> int:
    """Search a sorted sequence by halving an open range; return index or -1."""

    def helper(left: int, right: int) -> int:
        if left >= right:
            return -1
        mid = (left + right) // 2
        if values[mid] == value:
            return mid
        if values[mid] > value:
            return helper(left, mid - 1)
        return helper(mid + 1, right)

    return helper(0, len(values) - 1)