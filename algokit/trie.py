"""A prefix tree of lowercase words."""

from __future__ import annotations

import string
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    is_word: bool = False


def _is_lowercase(word: str) -> bool:
    return all(ch in string.ascii_lowercase for ch in word)


class Trie:
    """A set of lowercase ASCII words stored as a prefix tree."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add ``word``; it must hold lowercase ASCII letters only."""
        if not _is_lowercase(word):
            raise ValueError(f"not a lowercase word: {word!r}")
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.is_word = True

    def search(self, word: str) -> bool:
        """Whether ``word`` was inserted as a whole word."""
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            node = child
        return node.is_word

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)