"""
t9pad.multitap
==============
Multi-tap decoding: every run of repeated presses on one key selects a
single character by cycling through that key's candidate table.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .keys import KeyClass, Language, candidates


def runs(keys: Iterable[KeyClass]) -> Iterator[tuple[KeyClass, int]]:
    """Yield ``(key, presses)`` for each maximal run of equal keys."""
    current: KeyClass | None = None
    count = 0
    for key in keys:
        if key == current:
            count += 1
            continue
        if current is not None:
            yield current, count
        current, count = key, 1
    if current is not None:
        yield current, count


def decode(keys: Iterable[KeyClass], lang: Language) -> str:
    """
    Decode a key sequence as multi-tap text.

    A run of ``n`` presses on ``key`` emits
    ``candidates(key, lang)[(n - 1) % len(candidates(key, lang))]``, so
    pressing ``2`` four times in English wraps back to ``a``.
    """
    out: list[str] = []
    for key, presses in runs(keys):
        chars = candidates(key, lang)
        out.append(chars[(presses - 1) % len(chars)])
    return "".join(out)
