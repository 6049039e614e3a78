"""
t9pad.errors
============
Exceptions raised by the prediction core.

Only :class:`InvalidInputError` is meant to reach a user; the rest signal
data problems or caller mistakes.
"""

from __future__ import annotations


class T9Error(Exception):
    """Base class for every t9pad error."""


class InvalidInputError(T9Error, ValueError):
    """A symbol that is not one of ``0-9``, ``*`` or ``#``."""

    def __init__(self, symbol: str, message: str | None = None) -> None:
        self.symbol = symbol
        super().__init__(message or f"not a keypad input: {symbol!r}")


class NotWordInputError(InvalidInputError):
    """A control symbol (``0``, ``*``, ``#``) where a letter key was expected."""

    def __init__(self, symbol: str) -> None:
        super().__init__(symbol, f"control key, not a letter key: {symbol!r}")


class UnmappedCharacterError(T9Error, ValueError):
    """A literal character that no language table contains."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"unmapped character: {char!r}")


class DictionaryNotInitializedError(T9Error, RuntimeError):
    """A trie was queried before its build completed."""

    def __init__(self, lang: object) -> None:
        self.lang = lang
        super().__init__(f"dictionary not initialized for {lang}; call init() first")
