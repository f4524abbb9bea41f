"""Breadth-first and depth-first traversals of a graph."""

from __future__ import annotations

from collections import deque
from typing import Protocol


class _Traversable(Protocol):
    def __len__(self) -> int: ...

    def neighbors(self, vertex_id: int) -> list[int]: ...


def bfs(graph: _Traversable, start: int) -> list[int]:
    """Return vertices reachable from start in breadth-first order."""
    visited = [False] * len(graph)
    pending = deque([start])
    visited[start] = True
    order: list[int] = []
    while pending:
        current = pending.popleft()
        order.append(current)
        for vertex in graph.neighbors(current):
            if not visited[vertex]:
                visited[vertex] = True
                pending.append(vertex)
    return order


def dfs(graph: _Traversable, start: int) -> list[int]:
    """Return vertices reachable from start in depth-first order using a stack."""
    visited = [False] * len(graph)
    stack = [start]
    order: list[int] = []
    while stack:
        current = stack.pop()
        if visited[current]:
            continue
        visited[current] = True
        order.append(current)
        stack.extend(graph.neighbors(current))
    return order


def dfs_recursive(graph: _Traversable, start: int) -> list[int]:
    """Return vertices reachable from start in recursive depth-first order."""
    visited = [False] * len(graph)
    order: list[int] = []

    def visit(vertex: int) -> None:
        if visited[vertex]:
            return
        visited[vertex] = True
        order.append(vertex)
        for neighbor in graph.neighbors(vertex):
            visit(neighbor)

    visit(start)
    return order