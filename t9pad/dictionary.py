"""
t9pad.dictionary
================
Word-list loading and the per-language, build-once dictionary handle.

The tries are written exactly once and only read afterwards, so lookups take
no lock.  Whoever starts :meth:`Dictionaries.start` must join it (or call
:meth:`Dictionaries.wait`) before the first T9 lookup.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Iterable
from pathlib import Path

from .errors import DictionaryNotInitializedError
from .keys import Language
from .trie import TrieNode, build_trie

log = logging.getLogger(__name__)

DEFAULT_WORDLIST_DIR = Path(__file__).parent / "wordlists"


# ─── Wordlist loader ──────────────────────────────────────────────────────────

def load_wordlist(lang: Language, wordlist_dir: str | Path) -> list[str]:
    """
    Load ``<wordlist_dir>/<lang>.txt`` in file order.

    The file is assumed sorted by descending frequency.  Blank lines and
    lines starting with ``#`` are skipped; words are kept exactly as written.
    """
    path = Path(wordlist_dir) / f"{lang.value}.txt"
    if not path.exists():
        log.warning("[T9] wordlist not found for '%s' at %s", lang.value, path)
        return []
    words: list[str] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.rstrip("\r\n")
            if word and not word.startswith("#"):
                words.append(word)
    log.info("[T9] Loaded %s words  [%s]", f"{len(words):,}", lang.value)
    return words


# ─── Dictionaries ─────────────────────────────────────────────────────────────

class Dictionaries:
    """
    Word lists and tries for a fixed set of languages.

    Usage::

        dicts = Dictionaries()
        worker = dicts.start()      # build in the background
        ...
        dicts.wait()                # one-time barrier before the first lookup
        dicts.trie(Language.EN).lookup([KeyClass.TUV, KeyClass.GHI])
    """

    def __init__(
        self,
        wordlist_dir: str | Path | None = None,
        languages: Iterable[Language] = tuple(Language),
    ) -> None:
        self.wordlist_dir = Path(wordlist_dir) if wordlist_dir else DEFAULT_WORDLIST_DIR
        self.languages: tuple[Language, ...] = tuple(languages)
        self._lock = threading.Lock()
        self._words: dict[Language, tuple[str, ...]] = {}
        self._tries: dict[Language, TrieNode] = {}
        self._worker: threading.Thread | None = None

    # ── Building ──────────────────────────────────────────────────────────────

    def init(self) -> None:
        """Build every language's trie. Idempotent and safe to race."""
        for lang in self.languages:
            if lang in self._tries:
                continue
            with self._lock:
                if lang in self._tries:
                    continue
                words = self._load_locked(lang)
                started = time.perf_counter()
                root, skipped = build_trie(words)
                self._tries[lang] = root
            log.info(
                "[T9] Built %s trie: %s nodes in %.1f ms",
                lang.value, f"{root.count_nodes():,}", (time.perf_counter() - started) * 1000,
            )
            if skipped:
                log.debug("[T9] Skipped %d unmappable word(s) [%s]", skipped, lang.value)

    def start(self) -> threading.Thread:
        """Run :meth:`init` on a daemon thread and return it."""
        with self._lock:
            if self._worker is None:
                self._worker = threading.Thread(
                    target=self.init, name="t9pad-init", daemon=True
                )
                self._worker.start()
            return self._worker

    def wait(self) -> None:
        """Block until every trie is built, building here if nothing was started."""
        worker = self._worker
        if worker is not None:
            worker.join()
        self.init()

    # ── Access ────────────────────────────────────────────────────────────────

    def _load_locked(self, lang: Language) -> tuple[str, ...]:
        words = self._words.get(lang)
        if words is None:
            words = self._words[lang] = tuple(load_wordlist(lang, self.wordlist_dir))
        return words

    def words(self, lang: Language) -> tuple[str, ...]:
        """The raw word list, loaded on first use and never changed after."""
        words = self._words.get(lang)
        if words is None:
            with self._lock:
                words = self._load_locked(lang)
        return words

    def trie(self, lang: Language) -> TrieNode:
        try:
            return self._tries[lang]
        except KeyError:
            raise DictionaryNotInitializedError(lang.value) from None

    def is_ready(self, lang: Language) -> bool:
        return lang in self._tries


_default: Dictionaries | None = None
_default_lock = threading.Lock()


def default_dictionaries() -> Dictionaries:
    """The shared handle over the packaged word lists."""
    global _default
    with _default_lock:
        if _default is None:
            _default = Dictionaries()
        return _default


def init() -> None:
    """Build the shared dictionaries. Safe to call repeatedly or concurrently."""
    default_dictionaries().init()
