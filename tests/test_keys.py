import pytest

from t9pad.errors import InvalidInputError, NotWordInputError, UnmappedCharacterError
from t9pad.keys import (
    TABLES,
    Control,
    KeyClass,
    Language,
    candidates,
    classify_char,
    classify_input,
    encode_word,
)


@pytest.mark.parametrize("lang", list(Language))
def test_every_candidate_classifies_back_to_its_key(lang):
    for key, chars in TABLES[lang].items():
        for ch in chars:
            assert KeyClass.from_char(ch) is key, (lang, key, ch)


def test_tables_cover_all_nine_keys():
    for lang in Language:
        assert set(TABLES[lang]) == set(KeyClass)


def test_key_digit_is_on_its_own_key():
    for key in KeyClass:
        assert key.symbol in candidates(key, Language.EN)
    assert candidates(KeyClass.WXYZ, Language.EN).endswith("90")


def test_polish_letters_classify_regardless_of_language():
    assert KeyClass.from_char("ą") is KeyClass.ABC
    assert KeyClass.from_char("ż") is KeyClass.WXYZ
    assert "ą" not in candidates(KeyClass.ABC, Language.EN)


def test_unmapped_characters():
    assert KeyClass.from_char("A") is None
    assert KeyClass.from_char(" ") is None
    with pytest.raises(UnmappedCharacterError) as exc:
        classify_char("@")
    assert exc.value.char == "@"


def test_classify_input_letters_and_controls():
    assert classify_input("2") is KeyClass.ABC
    assert classify_input("9") is KeyClass.WXYZ
    assert classify_input("1") is KeyClass.PUNCTUATION
    assert classify_input("0") is Control.SPACE
    assert classify_input("*") is Control.NEXT
    assert classify_input("#") is Control.BACKSPACE


@pytest.mark.parametrize("symbol", ["a", "+", "", "22", " "])
def test_classify_input_rejects_other_symbols(symbol):
    with pytest.raises(InvalidInputError) as exc:
        classify_input(symbol)
    assert exc.value.symbol == symbol


@pytest.mark.parametrize("symbol", ["0", "*", "#"])
def test_from_symbol_rejects_controls(symbol):
    with pytest.raises(NotWordInputError):
        KeyClass.from_symbol(symbol)


def test_encode_word():
    assert encode_word("the") == [KeyClass.TUV, KeyClass.GHI, KeyClass.DEF]
    assert encode_word("don't")[3] is KeyClass.PUNCTUATION
    assert encode_word("The") is None
    assert encode_word("") == []


def test_language_from_code():
    assert Language.from_code(" PL ") is Language.PL
    with pytest.raises(ValueError):
        Language.from_code("de")
