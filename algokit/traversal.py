"""Traversals and structural queries on graphs given as adjacency lists.

A graph is a sequence whose ``i``-th item lists the neighbours of vertex ``i``.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Adjacency = Sequence[Sequence[int]]


def bfs_order(adjacency: Adjacency) -> list[int]:
    """Vertices reachable from vertex 0 in breadth-first order."""
    if not adjacency:
        return []
    seen = [False] * len(adjacency)
    seen[0] = True
    queue = deque([0])
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if not seen[neighbour]:
                seen[neighbour] = True
                queue.append(neighbour)
    return order


def dfs_order(adjacency: Adjacency) -> list[int]:
    """Vertices reachable from vertex 0 in depth-first preorder."""
    if not adjacency:
        return []
    seen = [False] * len(adjacency)
    order = []
    stack = [0]
    while stack:
        node = stack.pop()
        if seen[node]:
            continue
        seen[node] = True
        order.append(node)
        stack.extend(reversed(adjacency[node]))
    return order


def _in_degrees(adjacency: Adjacency) -> list[int]:
    degrees = [0] * len(adjacency)
    for neighbours in adjacency:
        for target in neighbours:
            degrees[target] += 1
    return degrees


def _kahn(adjacency: Adjacency) -> tuple[list[int], list[int]]:
    degrees = _in_degrees(adjacency)
    queue = deque(v for v, degree in enumerate(degrees) if degree == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for target in adjacency[node]:
            degrees[target] -= 1
            if degrees[target] == 0:
                queue.append(target)
    return order, degrees


def topological_sort(adjacency: Adjacency) -> list[int]:
    """Vertices of a directed graph in Kahn's topological order.

    Vertices on or behind a cycle are left out.
    """
    order, _ = _kahn(adjacency)
    return order


def has_cycle_directed_kahn(adjacency: Adjacency) -> bool:
    """Whether a directed graph has a cycle, found by in-degree elimination."""
    _, degrees = _kahn(adjacency)
    return any(degrees)


def has_cycle_directed_dfs(adjacency: Adjacency) -> bool:
    """Whether a directed graph has a cycle, found by a depth-first search."""
    new, on_path, finished = 0, 1, 2
    state = [new] * len(adjacency)
    for root in range(len(adjacency)):
        if state[root] != new:
            continue
        state[root] = on_path
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for target in neighbours:
                if state[target] == new:
                    state[target] = on_path
                    stack.append((target, iter(adjacency[target])))
                    break
                if state[target] == on_path:
                    return True
            else:
                state[node] = finished
                stack.pop()
    return False


def has_cycle_undirected(adjacency: Adjacency) -> bool:
    """Whether an undirected graph (each edge listed both ways) has a cycle."""
    size = len(adjacency)
    parent = [-1] * size
    seen = [False] * size
    for root in range(size):
        if seen[root]:
            continue
        seen[root] = True
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if not seen[neighbour]:
                    seen[neighbour] = True
                    parent[neighbour] = node
                    queue.append(neighbour)
                elif neighbour != parent[node]:
                    return True
    return False


def _finish_order(adjacency: Adjacency) -> list[int]:
    seen = [False] * len(adjacency)
    order = []
    for root in range(len(adjacency)):
        if seen[root]:
            continue
        seen[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for target in neighbours:
                if not seen[target]:
                    seen[target] = True
                    stack.append((target, iter(adjacency[target])))
                    break
            else:
                stack.pop()
                order.append(node)
    return order


def count_strongly_connected_components(adjacency: Adjacency) -> int:
    """Number of strongly connected components, by Kosaraju's algorithm."""
    reversed_graph: list[list[int]] = [[] for _ in adjacency]
    for source, neighbours in enumerate(adjacency):
        for target in neighbours:
            reversed_graph[target].append(source)

    seen = [False] * len(adjacency)
    components = 0
    for start in reversed(_finish_order(adjacency)):
        if seen[start]:
            continue
        components += 1
        seen[start] = True
        stack = [start]
        while stack:
            node = stack.pop()
            for target in reversed_graph[node]:
                if not seen[target]:
                    seen[target] = True
                    stack.append(target)
    return components