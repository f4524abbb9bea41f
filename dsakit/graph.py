"""An undirected weighted graph stored as adjacency lists."""

from __future__ import annotations

from typing import Sequence


class Graph:
    """An undirected graph whose vertices are identified by index and label."""

    def __init__(self, num_vertices: int = 0) -> None:
        if num_vertices < 0:
            raise ValueError("num_vertices must be non-negative")
        self._vertices: list[str] = [""] * num_vertices
        self._adjacency: list[list[tuple[int, int]]] = [
            [] for _ in range(num_vertices)
        ]

    @property
    def vertices(self) -> list[str]:
        return list(self._vertices)

    def _check_id(self, vertex_id: int) -> None:
        if not 0 <= vertex_id < len(self._vertices):
            raise IndexError(f"vertex id {vertex_id} out of range")

    def register_vertices(self, labels: Sequence[str]) -> bool:
        """Set the vertex labels and drop all edges.

        Returns False when vertices already exist and the count differs.
        """
        if self._vertices and len(self._vertices) != len(labels):
            return False
        self._vertices = list(labels)
        self._adjacency = [[] for _ in labels]
        return True

    def register_edge(self, id1: int, id2: int, weight: int) -> bool:
        """Add an undirected edge; return False if it already exists."""
        self._check_id(id1)
        self._check_id(id2)
        if self.get_weight(id1, id2) is not None:
            return False
        self._adjacency[id1].append((id2, weight))
        self._adjacency[id2].append((id1, weight))
        return True

    def __len__(self) -> int:
        return len(self._vertices)

    def get_id(self, label: str) -> int | None:
        """Return the index of the vertex with label, or None."""
        try:
            return self._vertices.index(label)
        except ValueError:
            return None

    def get_weight(self, id1: int, id2: int) -> int | None:
        """Return the weight of the edge between two vertices, or None."""
        self._check_id(id1)
        return next(
            (weight for dest, weight in self._adjacency[id1] if dest == id2), None
        )

    def neighbors(self, vertex_id: int) -> list[int]:
        """Return the ids adjacent to vertex_id in insertion order."""
        self._check_id(vertex_id)
        return [dest for dest, _ in self._adjacency[vertex_id]]