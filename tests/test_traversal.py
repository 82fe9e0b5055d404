import pytest

from algokit.traversal import (
    bfs_order,
    count_strongly_connected_components,
    dfs_order,
    has_cycle_directed_dfs,
    has_cycle_directed_kahn,
    has_cycle_undirected,
    topological_sort,
)

DAGS = [
    [[1, 2], [3], [3], []],
    [[], [0], [0, 1], [1, 2]],
    [[1], [2], [3], [4], []],
    [[2], [2], [], [0, 4], []],
]

CYCLIC = [
    [[1], [2], [0]],
    [[1], [2], [0, 3], [4], []],
    [[0], []],
    [[1], [2], [3], [1]],
]

ALL_DIRECTED = DAGS + CYCLIC

TREES = [
    (4, [(0, 1), (1, 2), (1, 3)]),
    (5, [(0, 1), (1, 2), (2, 3), (3, 4)]),
    (6, [(0, 1), (0, 2), (0, 3), (3, 4), (3, 5)]),
]


def _undirected(n, edges):
    adjacency = [[] for _ in range(n)]
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def _disjoint_union(first, second):
    shift = len(first)
    return [list(ns) for ns in first] + [[t + shift for t in ns] for ns in second]


def _reversed(adjacency):
    result = [[] for _ in adjacency]
    for source, neighbours in enumerate(adjacency):
        for target in neighbours:
            result[target].append(source)
    return result


def test_bfs_order_pinned():
    assert bfs_order([[1, 2], [3], [4], [], []]) == [0, 1, 2, 3, 4]


def test_dfs_order_pinned():
    assert dfs_order([[1, 2], [3], [4], [], []]) == [0, 1, 3, 2, 4]


@pytest.mark.parametrize("adjacency", ALL_DIRECTED)
def test_bfs_and_dfs_reach_the_same_vertices_once(adjacency):
    breadth = bfs_order(adjacency)
    depth = dfs_order(adjacency)
    assert breadth[0] == depth[0] == 0
    assert len(breadth) == len(set(breadth))
    assert len(depth) == len(set(depth))
    assert set(breadth) == set(depth)


@pytest.mark.parametrize("adjacency", ALL_DIRECTED)
def test_each_visited_vertex_has_an_earlier_discoverer(adjacency):
    breadth = bfs_order(adjacency)
    depth = dfs_order(adjacency)
    assert breadth[0] == 0
    assert depth[0] == 0
    for order in (breadth, depth):
        for i, node in enumerate(order[1:], start=1):
            assert any(node in adjacency[earlier] for earlier in order[:i])


def test_dfs_handles_long_chain():
    size = 5000
    chain = [[i + 1] for i in range(size - 1)] + [[]]
    assert dfs_order(chain) == list(range(size))


def test_empty_graph_has_empty_orders():
    assert bfs_order([]) == dfs_order([]) == []


@pytest.mark.parametrize("adjacency", DAGS)
def test_topological_sort_respects_every_edge(adjacency):
    order = topological_sort(adjacency)
    assert sorted(order) == list(range(len(adjacency)))
    position = {node: i for i, node in enumerate(order)}
    for source, neighbours in enumerate(adjacency):
        for target in neighbours:
            assert position[source] < position[target]


@pytest.mark.parametrize("adjacency", CYCLIC)
def test_topological_sort_leaves_out_cycles(adjacency):
    assert len(topological_sort(adjacency)) < len(adjacency)


@pytest.mark.parametrize("adjacency", ALL_DIRECTED)
def test_cycle_detectors_agree_with_topological_sort(adjacency):
    incomplete = len(topological_sort(adjacency)) < len(adjacency)
    assert has_cycle_directed_kahn(adjacency) == incomplete
    assert has_cycle_directed_dfs(adjacency) == incomplete


@pytest.mark.parametrize("adjacency", DAGS)
def test_dags_have_no_directed_cycle(adjacency):
    assert not has_cycle_directed_dfs(adjacency)
    assert not has_cycle_directed_kahn(adjacency)


def test_dfs_cycle_detection_on_long_graphs():
    size = 5000
    chain = [[i + 1] for i in range(size - 1)] + [[]]
    ring = [[i + 1] for i in range(size - 1)] + [[0]]
    assert not has_cycle_directed_dfs(chain)
    assert has_cycle_directed_dfs(ring)


@pytest.mark.parametrize("n, edges", TREES)
def test_trees_have_no_undirected_cycle(n, edges):
    assert not has_cycle_undirected(_undirected(n, edges))


@pytest.mark.parametrize("n, edges", TREES)
def test_extra_edge_in_tree_closes_a_cycle(n, edges):
    assert has_cycle_undirected(_undirected(n, edges + [(n - 1, n - 2)]))


@pytest.mark.parametrize("n, edges", TREES)
def test_forest_of_trees_has_no_undirected_cycle(n, edges):
    forest = _disjoint_union(_undirected(n, edges), _undirected(n, edges))
    assert not has_cycle_undirected(forest)


@pytest.mark.parametrize("adjacency", DAGS)
def test_dag_vertices_are_their_own_components(adjacency):
    assert count_strongly_connected_components(adjacency) == len(adjacency)


def test_single_ring_is_one_component():
    ring = [[1], [2], [3], [4], [0]]
    assert count_strongly_connected_components(ring) == 1


@pytest.mark.parametrize("adjacency", ALL_DIRECTED)
def test_component_count_survives_edge_reversal(adjacency):
    assert count_strongly_connected_components(
        _reversed(adjacency)
    ) == count_strongly_connected_components(adjacency)


@pytest.mark.parametrize("first", CYCLIC)
@pytest.mark.parametrize("second", DAGS[:2] + CYCLIC[:2])
def test_component_count_adds_over_disjoint_union(first, second):
    union = _disjoint_union(first, second)
    assert count_strongly_connected_components(union) == (
        count_strongly_connected_components(first)
        + count_strongly_connected_components(second)
    )


def test_component_count_on_long_chain():
    size = 5000
    chain = [[i + 1] for i in range(size - 1)] + [[]]
    assert count_strongly_connected_components(chain) == size