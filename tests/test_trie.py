import pytest

from t9pad.keys import KeyClass, encode_word
from t9pad.trie import TrieNode, build_trie

from .conftest import EN_WORDS

GHI, MNO, DEF, TUV = KeyClass.GHI, KeyClass.MNO, KeyClass.DEF, KeyClass.TUV


def test_every_indexed_word_is_found_by_its_own_keys():
    root, _ = build_trie(EN_WORDS)
    for word in EN_WORDS:
        keys = encode_word(word)
        if keys is not None:
            assert word in root.lookup(keys)


def test_unmappable_words_are_skipped_entirely():
    root, skipped = build_trie(["Hello", "naïve", "he"])
    assert skipped == 2
    assert root.lookup([GHI]) == ("he",)
    assert root.lookup([KeyClass.MNO, KeyClass.ABC]) == ()


def test_nodes_hold_every_word_passing_through_in_file_order():
    root, _ = build_trie(["then", "the", "good", "there", "the"])
    assert root.lookup([TUV]) == ("then", "the", "there", "the")
    assert root.lookup([TUV, GHI, DEF]) == ("then", "the", "there", "the")
    assert root.lookup([TUV, GHI, DEF, MNO]) == ("then",)


def test_ambiguous_words_share_a_node():
    root, _ = build_trie(["good", "home", "gone", "hone"])
    assert root.lookup([GHI, MNO, MNO, DEF]) == ("good", "home", "gone", "hone")


def test_missing_path_is_empty():
    root, _ = build_trie(["the"])
    assert root.lookup([TUV, TUV]) == ()
    assert root.find([KeyClass.WXYZ]) is None


def test_root_and_children():
    root, _ = build_trie(["go", "in"])
    assert root.content == ()
    assert root.lookup([]) == ()
    assert isinstance(root.child(GHI), TrieNode)
    assert root.child(TUV) is None
    assert root.count_nodes() == 2


def test_built_trie_cannot_be_changed_through_results():
    root, _ = build_trie(["the", "there"])
    result = root.lookup([TUV])
    with pytest.raises(AttributeError):
        result.append("junk")
    assert root.lookup([TUV]) == ("the", "there")
    with pytest.raises(TypeError):
        root.insert("tv", [TUV, TUV])
    assert root.child(TUV).child(TUV) is None
