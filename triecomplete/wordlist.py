"""Fetch a word list file for the dictionary loader."""

from __future__ import annotations

import logging
import os
import urllib.request

from triecomplete.constants import SYSTEM_WORDS_PATH, WORD_LIST_URLS

log = logging.getLogger("triecomplete")


def _clean(path: str) -> int:
    """Rewrite ``path`` as sorted, unique, single-token lines."""
    words: set[str] = set()
    with open(path, encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word and not any(ch.isspace() for ch in word):
                words.add(word)
    with open(path, "w", encoding="utf-8") as f:
        for word in sorted(words):
            f.write(word + "\n")
    return len(words)


def fetch_word_list(
    dest: str,
    urls: list[str] | None = None,
    system_path: str | None = None,
    force: bool = False,
) -> int:
    """Download a word list to ``dest`` and return its word count.

    Each URL is tried in order; if every download fails the system word
    list at ``system_path`` is copied instead.  An existing ``dest`` is
    kept unless ``force`` is set.  ``system_path`` defaults to
    ``SYSTEM_WORDS_PATH``; pass ``""`` to skip the copy.  Raises
    ``RuntimeError`` when no source is available.
    """
    if os.path.exists(dest) and not force:
        with open(dest, encoding="utf-8", errors="ignore") as f:
            count = sum(1 for line in f if line.strip())
        log.info("Word list already exists: %s (%s words)", dest, f"{count:,}")
        return count

    for url in WORD_LIST_URLS if urls is None else urls:
        try:
            log.info("Downloading %s", url)
            urllib.request.urlretrieve(url, dest)
        except OSError as exc:
            log.warning("Download failed: %s", exc)
            continue
        try:
            count = _clean(dest)
        except UnicodeDecodeError as exc:
            log.warning("Downloaded file is not UTF-8 text: %s", exc)
            os.remove(dest)
            continue
        log.info("Word list downloaded: %s words -> %s", f"{count:,}", dest)
        return count

    if system_path is None:
        system_path = SYSTEM_WORDS_PATH
    if system_path and os.path.exists(system_path):
        log.info("Using system word list: %s", system_path)
        with open(system_path, encoding="utf-8", errors="ignore") as src, \
                open(dest, "w", encoding="utf-8") as out:
            for line in src:
                out.write(line)
        count = _clean(dest)
        log.info("Word list created: %s words -> %s", f"{count:,}", dest)
        return count

    raise RuntimeError(
        f"Could not obtain a word list; save one word per line as {dest}"
    )
