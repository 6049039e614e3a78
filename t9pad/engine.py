"""
t9pad.engine
============
Pure prediction engine: no UI, no keyboard hooks.
Turns the current key-class buffer into three ranked suggestions.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from itertools import islice

from .dictionary import Dictionaries, default_dictionaries
from .keys import KeyClass, Language
from .multitap import decode

log = logging.getLogger(__name__)

Suggestions = tuple[str, str, str]

# Shown while nothing has been typed, and around a T9 miss.
EMPTY_SUGGESTIONS: Suggestions = ("", ":-)", ":-(")


class InputMode(Enum):
    MULTITAP = "multitap"
    T9 = "t9"

    @classmethod
    def from_name(cls, name: str) -> InputMode:
        key = name.strip().lower()
        if key == "mt":
            return cls.MULTITAP
        return cls(key)


def _pad(words: Sequence[str]) -> Suggestions:
    first, second, third = (list(words[:3]) + ["", "", ""])[:3]
    return first, second, third


class PredictionEngine:
    """
    Suggestion lookups against one :class:`Dictionaries` handle.

    Usage::

        engine = PredictionEngine(dicts)
        engine.t9([KeyClass.TUV, KeyClass.GHI, KeyClass.DEF], Language.EN)
        # ('the', 'there', 'then')
    """

    def __init__(self, dictionaries: Dictionaries) -> None:
        self.dictionaries = dictionaries

    def multitap(self, buffer: Sequence[KeyClass], lang: Language) -> Suggestions:
        """
        Decoded multi-tap text followed by the first two words that extend it.

        Completion is a case-sensitive prefix scan over the word list in file
        order; the trie is not consulted.
        """
        if not buffer:
            return EMPTY_SUGGESTIONS
        text = decode(buffer, lang)
        matches = (
            w for w in self.dictionaries.words(lang)
            if w.startswith(text) and w != text
        )
        first, second = (list(islice(matches, 2)) + ["", ""])[:2]
        log.debug("[T9] multitap %r -> %r, %r", text, first, second)
        return text, first, second

    def t9(self, buffer: Sequence[KeyClass], lang: Language) -> Suggestions:
        """
        The first three dictionary words sharing the buffer's key-class prefix.

        Falls back to the multi-tap decoding when the trie has no such path.
        Raises :class:`DictionaryNotInitializedError` if ``lang`` was never
        built.
        """
        if not buffer:
            return EMPTY_SUGGESTIONS
        words = self.dictionaries.trie(lang).lookup(buffer)
        if words:
            result = _pad(words)
        else:
            result = (decode(buffer, lang), EMPTY_SUGGESTIONS[1], EMPTY_SUGGESTIONS[2])
        log.debug("[T9] t9 %s -> %r", "".join(k.symbol for k in buffer), result)
        return result

    def suggest(
        self, buffer: Sequence[KeyClass], lang: Language, mode: InputMode
    ) -> Suggestions:
        if mode is InputMode.T9:
            return self.t9(buffer, lang)
        return self.multitap(buffer, lang)


def default_engine() -> PredictionEngine:
    """An engine over the shared packaged dictionaries."""
    return PredictionEngine(default_dictionaries())
