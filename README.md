# algokit

A small library of classic algorithms in plain Python. It covers graphs, grids,
sequences, heaps, tries and binary trees, and uses only the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## What it does not do

algokit is a library only. It has no command-line program and does not read
problem input from standard input. Every function takes ordinary Python data, such
as lists, tuples, dicts and node objects, and returns its answer as a value.

## Modules

### `algokit.shortest_paths`

- `dijkstra(n, edges, source)`: distances from `source` in an undirected weighted graph.
  The graph has `n` vertices numbered from 0 and is given as `(u, v, w)` edges.
  Vertices that cannot be reached get `UNREACHABLE` (`0x3F3F3F3F`).
- `dijkstra_matrix(matrix, source)`: Dijkstra on an adjacency matrix, where a zero
  entry means there is no edge. Vertices that cannot be reached get
  `MATRIX_UNREACHABLE` (`2**31 - 1`).
- `floyd_warshall(matrix)`: all-pairs shortest distances over a square matrix, in
  which `NO_EDGE` (`10_000_000`) marks a missing edge. It returns a new matrix.
- `parse_weight(token)`: reads one matrix entry. `"INF"` and `"10000000"` become
  `NO_EDGE`. Any other token must be a non-negative integer, or a `ValueError` is
  raised.
- `format_distances(matrix)`: renders a matrix with one row per line. Each cell is
  followed by a space, and missing edges are written as `INF`.
- `tree_diameter(n, edges)`: the length of the longest path in a weighted tree. The
  vertices are numbered from 1 and the edges are given as `(u, v, w)`.
- `level_of(n, edges)`: the breadth-first level of vertex `n`, counted from vertex
  1, in an unweighted undirected graph. A vertex that cannot be reached has level 0.

Vertices outside the graph raise `ValueError`.

### `algokit.traversal`

Each function takes an adjacency list: a sequence whose `i`-th item lists the
neighbours of vertex `i`.

- `bfs_order(adjacency)` and `dfs_order(adjacency)`: the vertices reachable from
  vertex 0, in breadth-first order and in depth-first preorder.
- `topological_sort(adjacency)`: Kahn's order. Vertices on a cycle, or behind one,
  are left out.
- `has_cycle_directed_kahn(adjacency)` and `has_cycle_directed_dfs(adjacency)`:
  cycle detection in directed graphs.
- `has_cycle_undirected(adjacency)`: cycle detection in undirected graphs, where
  each edge is listed in both directions.
- `count_strongly_connected_components(adjacency)`: Kosaraju's algorithm.

### `algokit.grids`

Grids are sequences of equal-length rows of integers.

- `count_paths(grid)`: the number of simple paths in a square grid from the top-left
  cell to the bottom-right cell. Cells holding `1` are walls.
- `path_exists(grid)`: whether the cell holding `2` can be reached from the cell
  holding `1`. Cells holding `0` are walls. If either cell is missing, a
  `ValueError` is raised.
- `shortest_path_length(grid, x, y)`: the fewest steps from `(0, 0)` to `(x, y)`
  through non-zero cells. It returns `-1` when there is no such path or when the
  target lies outside the grid.
- `snake_and_ladder_moves(jumps)`: the fewest die rolls from square 1 to square 30
  (`BOARD_SIZE`). `jumps` is a mapping, or an iterable of pairs, from the foot of a
  ladder or the head of a snake to where it leads. It returns `-1` when square 30
  cannot be reached.
- `flood_fill(grid, x, y, new_color)`: a copy of the grid in which the region of
  `(x, y)`'s colour is repainted.

### `algokit.sequences`

- `ThresholdCounter(values, k)`: a square-root decomposition. `count(left, right)`
  gives how many values in the inclusive range exceed `k`, and `update(index,
  value)` changes one value. `len()` gives the number of values.
- `min_swaps(values)`: the fewest swaps that sort the sequence.
- `running_medians(values)`: the median of every prefix, truncated to an integer.
- `can_rearrange(text)`: whether the lowercase letters of `text` can be ordered so
  that no two equal letters are adjacent.
- `josephus(n, k)`: the survivor's position, counted from 1, when every `k`-th of
  `n` people is removed.
- `word_breaks(words, text)`: every way to split `text` into dictionary words. Each
  split is returned as one space-separated string, and the list is sorted.

### `algokit.linked_list`

- `ListNode(data, next=None)`. Build a list with `ListNode.from_iterable(values)`,
  which returns `None` for an empty input. Read it back with `node.to_list()`,
  iterate its values, or walk its nodes with `node.nodes()`.
- `merge_k_lists(lists)` merges sorted lists with a min-heap.
  `merge_k_lists_scan(lists)` scans every head at each step. Both relink the
  existing nodes, and on ties the earlier list goes first.

### `algokit.trie`

`Trie` holds lowercase ASCII words. `insert` raises `ValueError` for any other word.

```python
from algokit.trie import Trie

trie = Trie(["the", "a", "there"])
"there" in trie     # True
trie.search("th")   # False
```

### `algokit.trees`

- `TreeNode(data, left=None, right=None)`
- `mirror(node)` and `mirror_iterative(node)` swap the children throughout the tree
  in place and return the root.
- `left_view(root)` and `left_view_recursive(root)` give the first value on each
  level.
- `nodes_at_distance(root, target, k)` gives the values of the nodes exactly `k`
  edges away from the node holding `target`'s value. `target` may be a `TreeNode`
  or a value. Nodes below the target come first, then those reached through each
  ancestor, nearest ancestor first.

## Example

```python
from algokit.shortest_paths import dijkstra
from algokit.traversal import topological_sort

dijkstra(3, [(0, 1, 4), (1, 2, 1), (0, 2, 7)], 0)   # [0, 4, 5]
topological_sort([[1], [2], []])                    # [0, 1, 2]
```