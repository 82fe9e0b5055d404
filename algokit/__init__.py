"""Classic graph, grid, sequence, linked-list, trie and binary tree algorithms."""

__version__ = "0.1.0"

__all__ = [
    "grids",
    "linked_list",
    "sequences",
    "shortest_paths",
    "traversal",
    "trees",
    "trie",
]