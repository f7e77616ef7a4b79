import doctest

import pytest

import triecomplete.trie as trie_module
from triecomplete.trie import Trie, TrieNode

WORDS = ["Bite", "Bites", "Bird", "apple", "Apply", "application", "ant", "Zebra", "zebu", "Zz"]


def test_new_trie_is_empty():
    t = Trie()
    assert len(t) == 0
    assert t.completions("ab") == []
    assert t.search("ab") == []
    assert not t.is_prefix("a")


def test_bite_scenario_completions(trie):
    assert set(trie.completions("Bit")) == {"e", "es"}
    assert set(trie.completions("bi")) == {"rd", "te", "tes"}
    assert trie.completions("B") == []


def test_bite_scenario_search(trie):
    assert set(trie.search("bi")) == {"bird", "bite", "bites"}


def test_results_are_sorted(trie):
    assert trie.completions("bi") == ["rd", "te", "tes"]
    assert trie.search("bi") == ["bird", "bite", "bites"]
    assert trie.completions("biTe") == ["s"]


def test_order_is_lexicographic_for_larger_set():
    words = ["banana", "band", "bandana", "ban", "bank", "banter", "bang", "banal"]
    t = Trie().insert_words(words)
    assert t.search("ba") == sorted(words)
    assert t.completions("ban") == sorted(w[3:] for w in words if w != "ban")


@pytest.mark.parametrize("prefix", ["", "b", "B", "z"])
def test_short_prefix_yields_nothing(trie, prefix):
    t = Trie().insert_words(WORDS)
    assert trie.completions(prefix) == []
    assert trie.search(prefix) == []
    assert t.completions(prefix) == []
    assert t.search(prefix) == []


def test_unknown_prefix_yields_nothing(trie):
    assert trie.completions("xy") == []
    assert trie.search("bix") == []
    assert trie.completions("Bitesz") == []


def test_prefix_that_is_a_word_is_excluded(trie):
    assert trie.completions("bite") == ["s"]
    assert trie.search("bite") == ["bite", "bites"]
    assert trie.completions("bites") == []


@pytest.mark.parametrize("prefix", ["bITe", "BITE", "bite", "Bite"])
def test_case_insensitive_queries(trie, prefix):
    assert trie.completions(prefix) == ["s"]


def test_storage_keeps_inserted_case(trie):
    assert "Bite" in trie
    assert "bite" not in trie
    assert trie.is_word("Bird")
    assert not trie.is_word("Bi")
    assert trie.is_prefix("BI")
    assert trie.is_prefix("bi")


def test_exact_case_wins_over_other_casings():
    t = Trie().insert_words(["Abd", "abc"])
    assert t.completions("ab") == ["c"]
    assert t.completions("Ab") == ["d"]
    assert t.completions("aB") == ["c"]
    assert t.completions("AB") == ["d"]


def test_mixed_case_variants_only_one_reachable():
    t = Trie().insert_words(["Abc", "abx"])
    # Each position resolves independently: "a" lands on the lowercase branch.
    assert t.search("aBc") == []
    assert t.completions("aB") == ["x"]
    assert t.completions("AB") == ["c"]


def test_upper_tried_before_lower():
    # Titlecase "ǅ" upper-cases to "Ǆ" and lower-cases to "ǆ".
    t = Trie().insert_words(["xǄa", "xǆb"])
    assert t.search("xǅ") == ["xǅa"]
    t2 = Trie().insert_words(["xǆb"])
    assert t2.search("xǅ") == ["xǅb"]


def test_search_uses_typed_prefix_case(trie):
    assert trie.search("BI") == ["BIrd", "BIte", "BItes"]


def test_completions_match_search_minus_prefix():
    t = Trie().insert_words(WORDS)
    for prefix in ["ap", "Ap", "AP", "ze", "ZE", "an", "bi", "Zz", "app", "appl"]:
        comps = t.completions(prefix)
        found = t.search(prefix)
        assert [prefix + c for c in comps] == found
        assert [w[len(prefix):] for w in found] == comps


def test_round_trip_two_char_prefix():
    t = Trie().insert_words(WORDS)
    for w in WORDS:
        if len(w) <= 2:
            continue
        results = [r.lower() for r in t.search(w[:2])]
        assert w.lower() in results


def test_two_char_word_is_its_own_prefix():
    t = Trie().insert_words(["Zz", "Zzz"])
    assert t.search("zz") == ["zzz"]
    assert t.completions("zz") == ["z"]


def test_no_ghost_words():
    t = Trie().insert_words(WORDS)
    inserted = {w.lower() for w in WORDS}
    for prefix in ["ap", "an", "bi", "ze", "zz", "app", "appli"]:
        for c in t.completions(prefix):
            assert (prefix + c).lower() in inserted


def test_idempotent_insert(trie):
    before = (trie.completions("bi"), trie.search("bi"), len(trie))
    trie.insert("Bite")
    trie.insert_words(["Bites", "Bird"])
    assert (trie.completions("bi"), trie.search("bi"), len(trie)) == before
    assert len(trie) == 3


def test_empty_word_is_noop():
    t = Trie()
    t.insert("")
    assert len(t) == 0
    assert not t.is_prefix("x")
    assert "" not in t


def test_word_prefix_of_another_word():
    t = Trie().insert_words(["car", "cart", "carton"])
    assert t.completions("ca") == ["r", "rt", "rton"]
    assert t.completions("car") == ["t", "ton"]
    assert len(t) == 3


def test_queries_do_not_mutate(trie):
    trie.completions("zz")
    trie.search("bird")
    trie.completions("Bi")
    assert len(trie) == 3
    assert not trie.is_prefix("zz")


def test_uncased_characters():
    t = Trie().insert_words(["C3PO", "c-3po", "42nd"])
    assert t.completions("42") == ["nd"]
    assert t.search("C3") == ["C3PO"]
    assert t.search("c-") == ["c-3po"]
    # "c" exact-matches the lowercase branch, which has no "3" child.
    assert t.search("c3") == []


def test_non_ascii_case_folding():
    t = Trie().insert_words(["Éclair", "Étude"])
    assert t.search("éc") == ["éclair"]
    assert t.search("ÉT") == ["ÉTude"]


def test_node_child_lookup_priority():
    node = TrieNode()
    upper = node.children["A"] = TrieNode("A")
    lower = node.children["a"] = TrieNode("a")
    assert node.child("a") is lower
    assert node.child("A") is upper
    del node.children["a"]
    assert node.child("a") is upper
    assert node.child("b") is None


def test_root_node_has_no_key():
    t = Trie().insert_words(["hello"])
    assert t._root.key is None
    assert not t._root.is_end_of_word
    assert t._root.children["h"].key == "h"


def test_contains_rejects_non_strings(trie):
    assert 42 not in trie
    assert None not in trie


def test_docstring_examples():
    failures, _ = doctest.testmod(trie_module)
    assert failures == 0
