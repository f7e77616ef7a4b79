"""triecomplete -- case-insensitive prefix autocompletion backed by a trie."""

from triecomplete.constants import MIN_PREFIX_LENGTH
from triecomplete.trie import Trie, TrieNode
from triecomplete.dictionary import Dictionary

__all__ = [
    "MIN_PREFIX_LENGTH",
    "Dictionary",
    "Trie",
    "TrieNode",
]
