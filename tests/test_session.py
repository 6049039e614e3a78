import pytest

from t9pad.keys import Control, KeyClass, classify_input
from t9pad.session import InputSession

ABC, DEF = KeyClass.ABC, KeyClass.DEF


def session_of(*keys):
    s = InputSession()
    for k in keys:
        s.apply(k)
    return s


def test_word_keys_append():
    s = session_of(ABC, DEF, ABC)
    assert s.buffer == [ABC, DEF, ABC]
    assert len(s) == 3


def test_backspace_removes_whole_trailing_run():
    s = session_of(ABC, ABC, ABC, DEF)
    s.apply(Control.BACKSPACE)
    assert s.buffer == [ABC, ABC, ABC]
    s.apply(Control.BACKSPACE)
    assert s.buffer == []


def test_backspace_stops_at_a_different_key():
    s = session_of(DEF, ABC, ABC)
    s.backspace()
    assert s.buffer == [DEF]


def test_backspace_on_empty_buffer_is_harmless():
    s = InputSession()
    s.apply(Control.BACKSPACE)
    assert s.buffer == []


def test_space_clears():
    s = session_of(ABC, DEF)
    s.apply(Control.SPACE)
    assert not s.has_input


def test_next_changes_nothing():
    s = session_of(ABC, DEF)
    s.apply(Control.NEXT)
    assert s.buffer == [ABC, DEF]


def test_driven_by_keypad_symbols():
    s = InputSession()
    for symbol in "2223*#":
        s.apply(classify_input(symbol))
    assert s.buffer == [ABC, ABC, ABC]
    assert repr(s) == "InputSession('222')"


def test_rejects_non_events():
    with pytest.raises(TypeError):
        InputSession().apply("2")
