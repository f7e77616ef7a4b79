"""Word list loader that feeds a trie."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from triecomplete.constants import DICTIONARY_SEARCH_PATHS, MINIMAL_WORDS
from triecomplete.trie import Trie

log = logging.getLogger("triecomplete")


class Dictionary:
    """Trie built from a one-word-per-line file."""

    def __init__(
        self,
        dict_path: str | None = None,
        trie: Trie | None = None,
        search_paths: Iterable[str] | None = None,
        lines: Iterable[str] | None = None,
    ):
        if trie is None:
            trie = Trie()
        elif not isinstance(trie, Trie):
            raise TypeError(f"expected a Trie, got {type(trie).__name__}")
        self.trie = trie
        self.path: str | None = None
        if lines is not None:
            self.load_lines(lines)
        else:
            self._load(dict_path, DICTIONARY_SEARCH_PATHS if search_paths is None else search_paths)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Dictionary:
        """Build a dictionary from in-memory lines, skipping file lookup."""
        return cls(lines=lines)

    def load_lines(self, lines: Iterable[str]) -> int:
        """Trim and insert each line; blank lines are skipped.

        Returns the number of words consumed.
        """
        count = 0
        for line in lines:
            word = line.strip()
            if word:
                self.trie.insert(word)
                count += 1
        return count

    def _load(self, dict_path: str | None, search_paths: Iterable[str]) -> None:
        candidates: list[str] = []
        if dict_path:
            if not os.path.exists(dict_path):
                log.warning("Dictionary %s not found -- trying default locations.", dict_path)
            candidates.append(dict_path)
        candidates.extend(search_paths)

        for path in candidates:
            if not os.path.exists(path):
                continue
            try:
                with open(path, "r", encoding="utf-8") as f:
                    lines = f.readlines()
            except (OSError, UnicodeDecodeError) as exc:
                log.warning("Could not read %s: %s", path, exc)
                continue
            count = self.load_lines(lines)
            if count:
                self.path = path
                log.info("Loaded %s words from %s", f"{len(self.trie):,}", path)
                return
            log.debug("%s contained no words", path)

        log.warning("No dictionary file found -- using built-in minimal word list.")
        self.load_lines(MINIMAL_WORDS)

    def completions(self, prefix: str) -> list[str]:
        return self.trie.completions(prefix)

    def search(self, prefix: str) -> list[str]:
        return self.trie.search(prefix)

    def __contains__(self, word: str) -> bool:
        return word in self.trie

    def __len__(self) -> int:
        return len(self.trie)
