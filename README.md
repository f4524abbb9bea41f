# dsakit

A small collection of classic data structures and algorithms written in plain
Python, with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.three_ints` | `three_ints_sum`, `three_ints_avg` (integer average, truncated toward zero) |
| `dsakit.store` | `StoreItem` and `Store`, a named store holding items |
| `dsakit.grid` | `Grid`, a rows × cols grid filled with `cols * row + col` |
| `dsakit.matrix` | `scale_matrix` (in place), `format_matrix` |
| `dsakit.linear_search` | `search`, `search_last_match`, `selection_sort` |
| `dsakit.recursion` | `search_first`, `search_last`, `are_equal_arrays`, `are_equal_arrays_from_head`, `is_palindrome`, `fibonacci`, `fibonacci_memoized`, `binary_search` |
| `dsakit.minimum` | `my_min` and the `Min` pair |
| `dsakit.vector` | `Vector`, a growable array that doubles its capacity |
| `dsakit.singly_linked_list` | `Node`, `SinglyLinkedList` |
| `dsakit.deque` | `Deque`, a doubly-linked double-ended queue |
| `dsakit.linked_sort` | `LinkedList` with insertion sort and merge sort |
| `dsakit.quicksort` | `quicksort` (in place, middle pivot) |
| `dsakit.hash_map` | `HashMap`, integer keys, open addressing with linear probing |
| `dsakit.bst` | `BinarySearchTree` |
| `dsakit.heapsort` | `percolate_down`, `heapsort` |
| `dsakit.min_heap` | `MinHeap`, `PriorityQueue` |
| `dsakit.sudoku` | `is_safe`, `solve_sudoku`, `format_grid` |
| `dsakit.graph` | `Graph`, an undirected weighted graph on adjacency lists |
| `dsakit.shortest_path` | `find_min_vertex`, `shortest_paths` (Dijkstra) |
| `dsakit.traversal` | `bfs`, `dfs`, `dfs_recursive` |
| `dsakit.array_set` | `ArraySet`, an insertion-ordered set kept in a list |

Empty containers raise `IndexError` when asked for a value they do not have
(`Deque.front`, `MinHeap.remove`, `Vector.pop` and so on). Lookups that may
miss return `None`: `HashMap.get`, `Graph.get_id`, `Graph.get_weight` and
`SinglyLinkedList.search`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from dsakit.deque import Deque
from dsakit.min_heap import PriorityQueue
from dsakit.bst import BinarySearchTree
from dsakit.hash_map import HashMap

d = Deque()
d.enqueue_back(1)
d.enqueue_back(2)
d.enqueue_front(0)
print(d.front(), d.back(), len(d))   # 0 2 3

pq = PriorityQueue()
for value in (23, 34, 15, 10):
    pq.enqueue(value)
print(pq.dequeue(), pq.peek())       # 10 15

tree = BinarySearchTree()
for key in (6, 9, 7, 8):
    tree.insert(key)
print(tree.in_order_traversal())     # [6, 7, 8, 9]

table = HashMap(101)
table.put(10, 20)
table.put(110, 30)                   # collides with 10, probed linearly
print(table.get(110), table.get(11)) # 30 None
```

Graphs are built from labelled vertices and weighted, undirected edges:

```python
from dsakit.graph import Graph
from dsakit.shortest_path import shortest_paths

graph = Graph()
graph.register_vertices(["A", "B", "C", "D"])
graph.register_edge(0, 1, 3)
graph.register_edge(1, 2, 1)
graph.register_edge(0, 3, 5)
graph.register_edge(2, 3, 1)
print(shortest_paths(graph, "A"))    # [0, 3, 4, 5]
```

Vertices that cannot be reached get the distance `math.inf`.

## Commands

A few modules come with a small demonstration command:

```
dsakit-three-ints      # sum and average of 5, 10, 20
dsakit-store           # a store with two items
dsakit-grid            # a 5 x 5 grid and its copies
dsakit-matrix          # a 2 x 5 matrix scaled by 2
dsakit-sudoku          # solves a hard sudoku by backtracking (slow)
dsakit-shortest-path   # Dijkstra on a four-vertex graph
```

The commands print fixed examples; none of them reads input from the user or
from files.