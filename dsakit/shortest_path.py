"""Dijkstra's single-source shortest paths over a Graph."""

from __future__ import annotations

import math
import sys
from typing import Sequence

from dsakit.graph import Graph


def find_min_vertex(distances: Sequence[float], visited: Sequence[bool]) -> int:
    """Return the unvisited vertex with the smallest distance.

    Ties go to the later index; 0 is returned when every vertex is visited.
    """
    smallest = math.inf
    chosen = 0
    for index, (distance, seen) in enumerate(zip(distances, visited)):
        if not seen and distance <= smallest:
            smallest = distance
            chosen = index
    return chosen


def shortest_paths(graph: Graph, src_label: str) -> list[float]:
    """Return the distance from src_label to every vertex; math.inf if unreachable."""
    source = graph.get_id(src_label)
    if source is None:
        raise KeyError(src_label)
    count = len(graph)
    distances: list[float] = [math.inf] * count
    visited = [False] * count
    distances[source] = 0

    for _ in range(count - 1):
        current = find_min_vertex(distances, visited)
        visited[current] = True
        if distances[current] == math.inf:
            continue
        for target in range(count):
            if visited[target]:
                continue
            weight = graph.get_weight(current, target)
            if weight is not None and distances[current] + weight < distances[target]:
                distances[target] = distances[current] + weight
    return distances


def main(argv: list[str] | None = None) -> int:
    """Compute distances from A in a small four-vertex graph."""
    del argv
    graph = Graph()
    graph.register_vertices(["A", "B", "C", "D"])
    graph.register_edge(0, 1, 3)
    graph.register_edge(1, 2, 1)
    graph.register_edge(0, 3, 5)
    graph.register_edge(2, 3, 1)
    print("Initialization done")
    print(" ".join(str(distance) for distance in shortest_paths(graph, "A")))
    return 0


if __name__ == "__main__":
    sys.exit(main())