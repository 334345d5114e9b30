"""A character trie mapping county names to per-state populations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class TrieNode:
    """One node of the trie."""

    children: dict[str, TrieNode] = field(default_factory=dict)
    end_word: bool = False
    state_populations: dict[str, str] = field(default_factory=dict)


class Trie:
    """Trie of county names, each holding populations keyed by state."""

    def __init__(self) -> None:
        self._root = TrieNode()

    def _walk(self, word: str) -> TrieNode | None:
        node = self._root
        for char in word:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def insert(self, word: str, state: str, population: str) -> None:
        """Record ``population`` for ``word`` in ``state``, replacing any earlier value."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, TrieNode())
        node.end_word = True
        node.state_populations[state] = population

    def search_full(self, word: str) -> dict[str, str]:
        """Return the state-to-population mapping for ``word``; empty if absent."""
        node = self._walk(word)
        if node is None or not node.end_word:
            return {}
        return dict(node.state_populations)

    def search_prefix(self, prefix: str) -> list[str]:
        """Return every stored word that starts with ``prefix``."""
        node = self._walk(prefix)
        if node is None:
            return []
        return list(self._entries(node, prefix))

    def _entries(self, node: TrieNode, prefix: str) -> Iterator[str]:
        if node.end_word:
            yield prefix
        for char, child in node.children.items():
            yield from self._entries(child, prefix + char)

    def is_empty(self) -> bool:
        """Return whether the root has no children."""
        return not self._root.children