"""
t9pad.composer
==============
Builds up committed text from keypad presses.

Sits between a front end and the engine: the front end hands over raw keypad
symbols and reads back :attr:`Composer.text`, :attr:`Composer.suggestions`
and :attr:`Composer.selected`.
"""

from __future__ import annotations

from .engine import EMPTY_SUGGESTIONS, InputMode, PredictionEngine, Suggestions
from .keys import Control, Language, classify_input
from .session import InputSession


class Composer:
    def __init__(
        self,
        engine: PredictionEngine,
        lang: Language = Language.EN,
        mode: InputMode = InputMode.MULTITAP,
    ) -> None:
        self.engine = engine
        self._check_language(lang)
        self.lang = lang
        self.mode = mode
        self.session = InputSession()
        self.text = ""
        self.suggestions: Suggestions = EMPTY_SUGGESTIONS
        self.selected = 0

    @property
    def current_word(self) -> str:
        return self.suggestions[self.selected]

    def press(self, symbol: str) -> Suggestions:
        """
        Handle one keypad symbol and return the refreshed suggestions.

        ``*`` moves the selection, ``0`` commits the selected suggestion
        followed by a space, and ``#`` with nothing pending deletes the last
        committed word.  Raises :class:`InvalidInputError` for any other
        symbol, leaving all state untouched.
        """
        event = classify_input(symbol)

        if event is Control.NEXT:
            self.selected = (self.selected + 1) % len(self.suggestions)
        elif event is Control.SPACE and self.current_word:
            self.text += self.current_word + " "
            self.selected = 0
        elif event is Control.BACKSPACE and not self.session.has_input:
            self._delete_word()

        self.session.apply(event)
        self.refresh()
        return self.suggestions

    def refresh(self) -> None:
        self.suggestions = self.engine.suggest(self.session.buffer, self.lang, self.mode)

    def _delete_word(self) -> None:
        words = self.text.split()
        self.text = " ".join(words[:-1]) + " " if len(words) > 1 else ""

    # ── Switching ─────────────────────────────────────────────────────────────

    @property
    def languages(self) -> tuple[Language, ...]:
        """Languages the engine's dictionaries build, in switching order."""
        return self.engine.dictionaries.languages

    def _check_language(self, lang: Language) -> None:
        if lang not in self.languages:
            known = ", ".join(known_lang.value for known_lang in self.languages)
            raise ValueError(f"language {lang.value!r} is not loaded (loaded: {known})")

    def set_language(self, lang: Language) -> None:
        self._check_language(lang)
        self.lang = lang
        self.refresh()

    def set_mode(self, mode: InputMode) -> None:
        self.mode = mode
        self.refresh()

    def cycle_language(self) -> Language:
        langs = list(self.languages)
        self.set_language(langs[(langs.index(self.lang) + 1) % len(langs)])
        return self.lang

    def cycle_mode(self) -> InputMode:
        modes = list(InputMode)
        self.set_mode(modes[(modes.index(self.mode) + 1) % len(modes)])
        return self.mode
