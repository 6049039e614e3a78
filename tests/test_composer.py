import pytest

from t9pad.composer import Composer
from t9pad.dictionary import Dictionaries
from t9pad.engine import EMPTY_SUGGESTIONS, InputMode, PredictionEngine
from t9pad.errors import InvalidInputError
from t9pad.keys import Language


@pytest.fixture
def composer(engine):
    return Composer(engine, Language.EN, InputMode.T9)


def type_keys(composer, symbols):
    for s in symbols:
        composer.press(s)
    return composer.suggestions


def test_starts_with_placeholders(composer):
    assert composer.suggestions == EMPTY_SUGGESTIONS
    assert composer.text == ""


def test_typing_and_committing(composer):
    assert type_keys(composer, "843") == ("the", "there", "then")
    composer.press("0")
    assert composer.text == "the "
    assert composer.suggestions == EMPTY_SUGGESTIONS
    assert composer.selected == 0


def test_next_selects_another_suggestion(composer):
    type_keys(composer, "843*")
    assert composer.selected == 1
    assert composer.current_word == "there"
    composer.press("0")
    assert composer.text == "there "


def test_next_wraps_around(composer):
    type_keys(composer, "843***")
    assert composer.selected == 0


def test_space_with_empty_selection_commits_nothing(composer):
    composer.press("0")
    assert composer.text == ""


def test_backspace_with_nothing_pending_deletes_a_word(composer):
    type_keys(composer, "8430" "46630")
    assert composer.text == "the good "
    composer.press("#")
    assert composer.text == "the "
    composer.press("#")
    assert composer.text == ""


def test_backspace_with_pending_input_edits_buffer(composer):
    type_keys(composer, "8430" "84")
    composer.press("#")
    assert composer.text == "the "
    assert composer.session.buffer and len(composer.session) == 1


def test_invalid_symbol_leaves_state(composer):
    type_keys(composer, "84")
    before = (list(composer.session.buffer), composer.suggestions, composer.text)
    with pytest.raises(InvalidInputError):
        composer.press("x")
    assert (list(composer.session.buffer), composer.suggestions, composer.text) == before


def test_switching_mode_recomputes(composer):
    type_keys(composer, "8")
    assert composer.suggestions == ("the", "there", "then")
    assert composer.cycle_mode() is InputMode.MULTITAP
    assert composer.suggestions == ("t", "the", "there")


def test_switching_language(composer):
    assert composer.cycle_language() is Language.PL
    type_keys(composer, "93")
    assert composer.suggestions == ("że", "żeby", "")
    composer.set_language(Language.EN)
    assert composer.suggestions == ("wd", ":-)", ":-(")


@pytest.fixture
def english_only(wordlist_dir):
    dicts = Dictionaries(wordlist_dir, [Language.EN])
    dicts.init()
    return PredictionEngine(dicts)


def test_cycle_language_stays_within_loaded_languages(english_only):
    composer = Composer(english_only, Language.EN, InputMode.T9)
    composer.press("8")
    assert composer.cycle_language() is Language.EN
    assert composer.suggestions == ("the", "there", "then")


def test_cannot_start_or_switch_to_unloaded_language(english_only):
    with pytest.raises(ValueError):
        Composer(english_only, Language.PL, InputMode.T9)
    composer = Composer(english_only, Language.EN, InputMode.T9)
    with pytest.raises(ValueError):
        composer.set_language(Language.PL)
    assert composer.lang is Language.EN
