"""
t9pad.session
=============
The pending-word buffer of a single typing session.
"""

from __future__ import annotations

from .keys import Control, Input, KeyClass


class InputSession:
    """
    Ordered key classes typed since the last space.

    Backspace removes the whole trailing run of equal keys, i.e. one
    multi-tap character rather than one key press.
    """

    def __init__(self) -> None:
        self.buffer: list[KeyClass] = []

    def apply(self, event: Input) -> None:
        if isinstance(event, KeyClass):
            self.push(event)
        elif event is Control.SPACE:
            self.space()
        elif event is Control.BACKSPACE:
            self.backspace()
        elif event is Control.NEXT:
            self.next()
        else:
            raise TypeError(f"not an input event: {event!r}")

    def push(self, key: KeyClass) -> None:
        self.buffer.append(key)

    def space(self) -> None:
        self.buffer.clear()

    def backspace(self) -> None:
        if not self.buffer:
            return
        last = self.buffer.pop()
        while self.buffer and self.buffer[-1] == last:
            self.buffer.pop()

    def next(self) -> None:
        """Cycling the shown suggestion is a display concern; nothing to do."""

    @property
    def has_input(self) -> bool:
        return bool(self.buffer)

    def __len__(self) -> int:
        return len(self.buffer)

    def __repr__(self) -> str:
        return f"InputSession({''.join(k.symbol for k in self.buffer)!r})"
