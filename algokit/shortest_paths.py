"""Shortest-path and distance computations on weighted and unweighted graphs."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence

#: Distance reported by :func:`dijkstra` for vertices the source cannot reach.
UNREACHABLE = 0x3F3F3F3F
#: Distance reported by :func:`dijkstra_matrix` for vertices the source cannot reach.
MATRIX_UNREACHABLE = 2**31 - 1
#: Weight that stands for a missing edge in :func:`floyd_warshall` matrices.
NO_EDGE = 10_000_000
#: Textual form of :data:`NO_EDGE` used when reading and writing matrices.
NO_EDGE_TOKEN = "INF"

_WeightedAdjacency = list[list[tuple[int, int]]]


def _check_vertex(vertex: int, n: int) -> None:
    if not 0 <= vertex < n:
        raise ValueError(f"vertex {vertex} is outside the graph of {n} vertices")


def _undirected(
    n: int, edges: Iterable[tuple[int, int, int]], base: int = 0
) -> _WeightedAdjacency:
    """Build a weighted undirected adjacency list with vertices numbered from ``base``."""
    adjacency: _WeightedAdjacency = [[] for _ in range(n)]
    for u, v, weight in edges:
        a, b = u - base, v - base
        if not (0 <= a < n and 0 <= b < n):
            raise ValueError(f"edge ({u}, {v}) refers to a vertex outside the graph")
        adjacency[a].append((b, weight))
        adjacency[b].append((a, weight))
    return adjacency


def dijkstra(
    n: int, edges: Iterable[tuple[int, int, int]], source: int
) -> list[int]:
    """Distances from ``source`` in an undirected graph given as ``(u, v, w)`` edges.

    Vertices are numbered from 0; unreachable ones get :data:`UNREACHABLE`.
    """
    graph = _undirected(n, edges)
    _check_vertex(source, n)
    distances = [UNREACHABLE] * n
    distances[source] = 0
    heap = [(0, source)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance != distances[node]:
            continue
        for neighbour, weight in graph[node]:
            candidate = distance + weight
            if distances[neighbour] > candidate:
                distances[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distances


def dijkstra_matrix(matrix: Sequence[Sequence[int]], source: int) -> list[int]:
    """Distances from ``source`` in a graph given as an adjacency matrix.

    A zero entry means there is no edge; unreachable vertices get
    :data:`MATRIX_UNREACHABLE`.
    """
    size = len(matrix)
    _check_vertex(source, size)
    done = [False] * size
    distances = [MATRIX_UNREACHABLE] * size
    distances[source] = 0
    heap = [(0, source)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance != distances[node] or done[node]:
            continue
        done[node] = True
        for neighbour, weight in enumerate(matrix[node]):
            if weight and not done[neighbour]:
                candidate = distance + weight
                if distances[neighbour] > candidate:
                    distances[neighbour] = candidate
                    heapq.heappush(heap, (candidate, neighbour))
    return distances


def parse_weight(token: str) -> int:
    """Read one matrix entry: a non-negative integer or the missing-edge token."""
    if token in (NO_EDGE_TOKEN, str(NO_EDGE)):
        return NO_EDGE
    if not (token.isascii() and token.isdigit()):
        raise ValueError(f"not a weight: {token!r}")
    return int(token)


def floyd_warshall(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """All-pairs shortest distances; :data:`NO_EDGE` marks a missing edge."""
    table = [list(row) for row in matrix]
    size = len(table)
    if any(len(row) != size for row in table):
        raise ValueError("distance matrix must be square")
    for via in range(size):
        via_row = table[via]
        for row in table:
            to_via = row[via]
            for target, through in enumerate(via_row):
                candidate = to_via + through
                if candidate < row[target]:
                    row[target] = candidate
    return table


def format_distances(matrix: Sequence[Sequence[int]]) -> str:
    """Render a distance matrix, one row per line, writing missing edges as ``INF``."""
    return "".join(
        "".join(
            f"{NO_EDGE_TOKEN if cell == NO_EDGE else cell} " for cell in row
        )
        + "\n"
        for row in matrix
    )


def _tree_distances(graph: _WeightedAdjacency, start: int) -> list[int]:
    distances = [0] * len(graph)
    seen = [False] * len(graph)
    seen[start] = True
    queue = deque([start])
    while queue:
        node = queue.popleft()
        seen[node] = True
        for neighbour, weight in graph[node]:
            if not seen[neighbour]:
                distances[neighbour] = distances[node] + weight
                queue.append(neighbour)
    return distances


def tree_diameter(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Length of the longest path in a weighted tree with vertices numbered from 1."""
    if n < 1:
        raise ValueError("a tree needs at least one vertex")
    graph = _undirected(n, edges, base=1)
    from_first = _tree_distances(graph, 0)
    farthest = max(range(n), key=from_first.__getitem__)
    return max(_tree_distances(graph, farthest))


def level_of(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Breadth-first level of vertex ``n`` counted from vertex 1.

    Vertices are numbered from 1; a vertex that cannot be reached has level 0.
    """
    if n < 1:
        raise ValueError("the graph needs at least one vertex")
    graph = _undirected(n, ((a, b, 1) for a, b in edges), base=1)
    seen = [False] * n
    levels = [0] * n
    queue = deque([0])
    while queue:
        node = queue.popleft()
        for neighbour, _ in graph[node]:
            if not seen[neighbour]:
                seen[neighbour] = True
                levels[neighbour] = levels[node] + 1
                queue.append(neighbour)
    return levels[n - 1]