"""Binary tree operations: mirroring, left views and distance queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    data: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def mirror(node: Optional[TreeNode]) -> Optional[TreeNode]:
    """Swap left and right children throughout the tree, in place; return the root."""
    if node is None:
        return None
    mirror(node.left)
    mirror(node.right)
    node.left, node.right = node.right, node.left
    return node


def mirror_iterative(node: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree level by level, in place; return the root."""
    if node is None:
        return None
    queue = deque([node])
    while queue:
        current = queue.popleft()
        current.left, current.right = current.right, current.left
        queue.extend(child for child in (current.left, current.right) if child)
    return node


def left_view(root: Optional[TreeNode]) -> list[int]:
    """The first value on every level, top to bottom, found level by level."""
    view: list[int] = []
    level = [root] if root is not None else []
    while level:
        view.append(level[0].data)
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return view


def left_view_recursive(root: Optional[TreeNode]) -> list[int]:
    """The first value on every level, top to bottom, found by preorder descent."""
    view: list[int] = []

    def visit(node: Optional[TreeNode], depth: int) -> None:
        if node is None:
            return
        if depth == len(view):
            view.append(node.data)
        visit(node.left, depth + 1)
        visit(node.right, depth + 1)

    visit(root, 0)
    return view


def _at_depth(node: Optional[TreeNode], depth: int) -> Iterator[int]:
    if node is None or depth < 0:
        return
    if depth == 0:
        yield node.data
        return
    yield from _at_depth(node.left, depth - 1)
    yield from _at_depth(node.right, depth - 1)


def _path_to(root: TreeNode, value: int) -> Optional[list[TreeNode]]:
    stack: list[tuple[TreeNode, list[TreeNode]]] = [(root, [root])]
    while stack:
        node, path = stack.pop()
        if node.data == value:
            return path
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, [*path, child]))
    return None


def nodes_at_distance(
    root: TreeNode, target: TreeNode | int, k: int
) -> list[int]:
    """Values of the nodes exactly ``k`` edges from the node holding ``target``'s value.

    Nodes below the target come first in preorder, then those reached through
    each ancestor, nearest ancestor first.
    """
    if k < 0:
        raise ValueError("distance must not be negative")
    value = target.data if isinstance(target, TreeNode) else target
    path = _path_to(root, value)
    if path is None:
        raise ValueError(f"no node holding {value!r} in the tree")

    found = list(_at_depth(path[-1], k))
    ancestors = zip(reversed(path[:-1]), reversed(path[1:]))
    for distance, (ancestor, child) in enumerate(ancestors, start=1):
        if distance > k:
            break
        if distance == k:
            found.append(ancestor.data)
            break
        other = ancestor.right if child is ancestor.left else ancestor.left
        found.extend(_at_depth(other, k - distance - 1))
    return found