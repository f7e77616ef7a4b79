"""Prefix trie for case-insensitive autocompletion.

Words are stored with the casing they were inserted with; case folding
happens only while descending along a query prefix.  Queries return
results in lexicographic order of the emitted strings.

A ``Trie`` is meant to be built first and queried afterwards.  Nothing
here is synchronized: a finished trie can be read from several threads,
but inserting concurrently is not supported.
"""

from __future__ import annotations

from typing import Iterable

from triecomplete.constants import MIN_PREFIX_LENGTH


class TrieNode:
    """Single character position in the trie.  The root's key is ``None``."""

    __slots__ = ("key", "children", "is_end_of_word")

    def __init__(self, key: str | None = None):
        self.key = key
        self.children: dict[str, TrieNode] = {}
        self.is_end_of_word: bool = False

    def child(self, ch: str) -> TrieNode | None:
        """Child for ``ch`` trying exact case, then upper, then lower."""
        children = self.children
        node = children.get(ch)
        if node is None:
            node = children.get(ch.upper())
            if node is None:
                node = children.get(ch.lower())
        return node

    def __repr__(self) -> str:
        end = "*" if self.is_end_of_word else ""
        return f"TrieNode({self.key!r}{end}, {len(self.children)} children)"


class Trie:
    """Dictionary of words answering prefix completions and searches."""

    def __init__(self):
        self._root = TrieNode()
        self._size = 0

    def insert(self, word: str) -> None:
        if not word:
            return
        node = self._root
        for ch in word:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = node.children[ch] = TrieNode(ch)
            node = nxt
        if not node.is_end_of_word:
            node.is_end_of_word = True
            self._size += 1

    def insert_words(self, words: Iterable[str]) -> Trie:
        for word in words:
            self.insert(word)
        return self

    def is_word(self, word: str) -> bool:
        """Exact-case membership test for a complete word."""
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.is_end_of_word

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def completions(self, prefix: str) -> list[str]:
        """Suffixes that turn ``prefix`` into a known word.

        The prefix itself is never returned, even when it is a word.
        Prefixes shorter than ``MIN_PREFIX_LENGTH`` give no completions.

        >>> Trie().insert_words(["Bite", "Bites", "Bird"]).completions("bi")
        ['rd', 'te', 'tes']
        """
        if len(prefix) < MIN_PREFIX_LENGTH:
            return []
        node = self._walk(prefix)
        if node is None:
            return []
        return _collect(node, "")

    def search(self, prefix: str) -> list[str]:
        """Whole words starting with ``prefix``, spelled with the typed prefix.

        >>> Trie().insert_words(["Bite", "Bites", "Bird"]).search("bi")
        ['bird', 'bite', 'bites']
        """
        if len(prefix) < MIN_PREFIX_LENGTH:
            return []
        node = self._walk(prefix)
        if node is None:
            return []
        return _collect(node, prefix)

    def _walk(self, s: str) -> TrieNode | None:
        node = self._root
        for ch in s:
            node = node.child(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_word(word)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"Trie({self._size} words)"


def _collect(node: TrieNode, seed: str) -> list[str]:
    """Every word below ``node`` (excluding ``node``), each prefixed by ``seed``."""
    results: list[str] = []
    # LIFO worklist; children pushed in reverse so the smallest key pops first.
    work: list[tuple[TrieNode, str]] = [
        (child, seed) for _, child in sorted(node.children.items(), reverse=True)
    ]
    while work:
        current, acc = work.pop()
        acc += current.key
        if current.is_end_of_word:
            results.append(acc)
        for _, child in sorted(current.children.items(), reverse=True):
            work.append((child, acc))
    return results
