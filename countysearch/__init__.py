"""Trie and chained hash map for searching US county data, with an interactive menu."""

__version__ = "0.1.0"
__all__ = ["cli", "hashmap", "trie"]