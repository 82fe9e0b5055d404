import pytest

from algokit.trees import (
    TreeNode,
    left_view,
    left_view_recursive,
    mirror,
    mirror_iterative,
    nodes_at_distance,
)


def _shape(node):
    if node is None:
        return None
    return (node.data, _shape(node.left), _shape(node.right))


def _sample():
    #        20
    #      8    22
    #    4   12
    #      10  14
    twelve = TreeNode(12, TreeNode(10), TreeNode(14))
    eight = TreeNode(8, TreeNode(4), twelve)
    return TreeNode(20, eight, TreeNode(22))


@pytest.mark.parametrize("flip", [mirror, mirror_iterative])
def test_mirror_twice_restores_tree(flip):
    tree = _sample()
    before = _shape(tree)
    flip(flip(tree))
    assert _shape(tree) == before


@pytest.mark.parametrize("flip", [mirror, mirror_iterative])
def test_mirror_swaps_children(flip):
    tree = TreeNode(1, TreeNode(2), TreeNode(3))
    flip(tree)
    assert (tree.left.data, tree.right.data) == (3, 2)


def test_mirror_variants_agree():
    assert _shape(mirror(_sample())) == _shape(mirror_iterative(_sample()))


@pytest.mark.parametrize("flip", [mirror, mirror_iterative])
def test_mirror_of_empty_tree(flip):
    assert flip(None) is None


@pytest.mark.parametrize("view", [left_view, left_view_recursive])
def test_left_view(view):
    assert view(_sample()) == [20, 8, 4, 10]


@pytest.mark.parametrize("view", [left_view, left_view_recursive])
def test_left_view_of_empty_tree(view):
    assert view(None) == []


@pytest.mark.parametrize("view", [left_view, left_view_recursive])
def test_left_view_sees_right_child_when_no_left(view):
    tree = TreeNode(1, None, TreeNode(3, TreeNode(5)))
    assert view(tree) == [1, 3, 5]


def test_left_view_variants_agree_after_mirror():
    tree = mirror(_sample())
    assert left_view(tree) == left_view_recursive(tree)


def test_nodes_at_distance_worked_example():
    tree = _sample()
    target = tree.left
    assert nodes_at_distance(tree, target, 2) == [10, 14, 22]


def test_distance_zero_is_the_target():
    tree = _sample()
    assert nodes_at_distance(tree, 12, 0) == [12]


def test_distance_one_includes_parent():
    tree = _sample()
    assert sorted(nodes_at_distance(tree, 12, 1)) == [8, 10, 14]


def test_distance_reaching_root():
    tree = _sample()
    assert nodes_at_distance(tree, 12, 2) == [4, 20]


def test_distance_from_root_goes_down_only():
    tree = _sample()
    assert nodes_at_distance(tree, tree, 1) == [8, 22]


def test_distance_beyond_tree_is_empty():
    assert nodes_at_distance(_sample(), 10, 10) == []


def test_distance_is_symmetric():
    tree = _sample()
    assert 22 in nodes_at_distance(tree, 10, 4)
    assert 10 in nodes_at_distance(tree, 22, 4)


def test_missing_target_raises():
    with pytest.raises(ValueError):
        nodes_at_distance(_sample(), 99, 1)


def test_negative_distance_raises():
    with pytest.raises(ValueError):
        nodes_at_distance(_sample(), 8, -1)