"""
t9pad.keys
==========
Keypad key classes, the per-language candidate tables, and the classifiers
that turn literal characters and raw keypad symbols into key classes.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Union

from .errors import InvalidInputError, NotWordInputError, UnmappedCharacterError


class KeyClass(IntEnum):
    """One of the nine letter keys, ordered by key number."""

    PUNCTUATION = 1
    ABC = 2
    DEF = 3
    GHI = 4
    JKL = 5
    MNO = 6
    PQRS = 7
    TUV = 8
    WXYZ = 9

    @classmethod
    def from_char(cls, char: str) -> KeyClass | None:
        """Key class of a literal character in any language, ``None`` if unmapped."""
        return CHAR_TO_KEY.get(char)

    @classmethod
    def from_symbol(cls, symbol: str) -> KeyClass:
        """Key class of a raw keypad symbol ``1``-``9``."""
        if len(symbol) == 1 and "1" <= symbol <= "9":
            return cls(int(symbol))
        if symbol in CONTROL_SYMBOLS:
            raise NotWordInputError(symbol)
        raise InvalidInputError(symbol)

    @property
    def symbol(self) -> str:
        return str(self.value)


class Language(Enum):
    EN = "en"
    PL = "pl"

    @classmethod
    def from_code(cls, code: str) -> Language:
        try:
            return cls(code.strip().lower())
        except ValueError:
            known = ", ".join(lang.value for lang in cls)
            raise ValueError(f"unknown language {code!r} (known: {known})") from None


class Control(Enum):
    """Non-letter keypad inputs."""

    NEXT = "*"
    SPACE = "0"
    BACKSPACE = "#"


Input = Union[KeyClass, Control]

CONTROL_SYMBOLS: dict[str, Control] = {c.value: c for c in Control}


# ─── Candidate tables ─────────────────────────────────────────────────────────

_PUNCTUATION = ",.!?'-&1"

TABLES: dict[Language, dict[KeyClass, str]] = {
    Language.EN: {
        KeyClass.PUNCTUATION: _PUNCTUATION,
        KeyClass.ABC: "abc2",
        KeyClass.DEF: "def3",
        KeyClass.GHI: "ghi4",
        KeyClass.JKL: "jkl5",
        KeyClass.MNO: "mno6",
        KeyClass.PQRS: "pqrs7",
        KeyClass.TUV: "tuv8",
        KeyClass.WXYZ: "wxyz90",
    },
    Language.PL: {
        KeyClass.PUNCTUATION: _PUNCTUATION,
        KeyClass.ABC: "abcąć2",
        KeyClass.DEF: "defę3",
        KeyClass.GHI: "ghi4",
        KeyClass.JKL: "jklł5",
        KeyClass.MNO: "mnońó6",
        KeyClass.PQRS: "pqrsś7",
        KeyClass.TUV: "tuv8",
        KeyClass.WXYZ: "wxyzżź90",
    },
}


def candidates(key: KeyClass, lang: Language) -> str:
    """Ordered characters that repeated presses of ``key`` cycle through."""
    return TABLES[lang][key]


def _build_char_to_key() -> dict[str, KeyClass]:
    mapping: dict[str, KeyClass] = {}
    for table in TABLES.values():
        for key, chars in table.items():
            for ch in chars:
                mapping[ch] = key
    return mapping


CHAR_TO_KEY: dict[str, KeyClass] = _build_char_to_key()


# ─── Classifiers ──────────────────────────────────────────────────────────────

def classify_char(char: str) -> KeyClass:
    key = KeyClass.from_char(char)
    if key is None:
        raise UnmappedCharacterError(char)
    return key


def classify_input(symbol: str) -> Input:
    """
    Convert one keypad symbol into an input event.

    ``1``-``9`` give a :class:`KeyClass`; ``0``, ``*`` and ``#`` give
    :attr:`Control.SPACE`, :attr:`Control.NEXT` and :attr:`Control.BACKSPACE`.
    Anything else raises :class:`InvalidInputError`.
    """
    control = CONTROL_SYMBOLS.get(symbol)
    if control is not None:
        return control
    return KeyClass.from_symbol(symbol)


def encode_word(word: str) -> list[KeyClass] | None:
    """Key classes of every character of ``word``, or ``None`` if any is unmapped."""
    keys: list[KeyClass] = []
    for ch in word:
        key = CHAR_TO_KEY.get(ch)
        if key is None:
            return None
        keys.append(key)
    return keys
