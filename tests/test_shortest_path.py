import math

import pytest

from dsakit.graph import Graph
from dsakit.shortest_path import find_min_vertex, main, shortest_paths

EDGES = [(0, 1, 3), (1, 2, 1), (0, 3, 5), (2, 3, 1)]


def make_graph():
    graph = Graph()
    graph.register_vertices(["A", "B", "C", "D"])
    for a, b, w in EDGES:
        graph.register_edge(a, b, w)
    return graph


def test_distances_from_a():
    assert shortest_paths(make_graph(), "A") == [0, 3, 4, 5]


def test_source_distance_is_zero():
    distances = shortest_paths(make_graph(), "C")
    assert distances[2] == 0


def test_edge_relaxation_invariant():
    for label in "ABCD":
        distances = shortest_paths(make_graph(), label)
        for a, b, w in EDGES:
            assert distances[b] <= distances[a] + w
            assert distances[a] <= distances[b] + w


def test_distances_are_symmetric():
    graph = make_graph()
    labels = "ABCD"
    table = {label: shortest_paths(graph, label) for label in labels}
    for i, a in enumerate(labels):
        for j, b in enumerate(labels):
            assert table[a][j] == table[b][i]


def test_unreachable_vertex_is_infinite():
    graph = Graph()
    graph.register_vertices(["A", "B", "C"])
    graph.register_edge(0, 1, 2)
    distances = shortest_paths(graph, "A")
    assert distances[1] == 2
    assert distances[2] == math.inf


def test_unknown_label_raises():
    with pytest.raises(KeyError):
        shortest_paths(make_graph(), "Z")


def test_find_min_vertex_picks_smallest_unvisited():
    assert find_min_vertex([5, 2, 7], [False, False, False]) == 1
    assert find_min_vertex([5, 2, 7], [False, True, False]) == 0


def test_find_min_vertex_ties_go_to_later_index():
    assert find_min_vertex([2, 2], [False, False]) == 1


def test_find_min_vertex_all_visited_returns_zero():
    assert find_min_vertex([1, 2], [True, True]) == 0


def test_main_prints_distances(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Initialization done"
    assert out[1].split() == ["0", "3", "4", "5"]