import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from triecomplete.trie import Trie


@pytest.fixture
def trie():
    return Trie().insert_words(["Bite", "Bites", "Bird"])


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "popular.txt"
    path.write_text("  Bite\nBites  \n\n\tBird\n   \n", encoding="utf-8")
    return path
