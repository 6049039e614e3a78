"""
t9pad.layouts
=============
Physical keyboard layouts.  Each maps a pressed key to the keypad symbol it
stands for.
"""

from __future__ import annotations

# Phone order, 1 2 3 on top.
_T9: dict[str, str] = {s: s for s in "123456789*0#"}

# Numeric-pad order, 7 8 9 on top.
_NUM: dict[str, str] = {
    "7": "1", "8": "2", "9": "3",
    "4": "4", "5": "5", "6": "6",
    "1": "7", "2": "8", "3": "9",
    ",": "*", ".": "*",
    "0": "0",
    "↵": "#", "Enter": "#", "Return": "#",
}

# Left-hand letter block.
_KBD: dict[str, str] = {"1": "1", "2": "2", "3": "3"}
for _key, _symbol in zip("qweasdzxc", "456789*0#"):
    _KBD[_key] = _symbol
    _KBD[_key.upper()] = _symbol

LAYOUTS: dict[str, dict[str, str]] = {"T9": _T9, "NUM": _NUM, "KBD": _KBD}


def translate(layout: str, key: str) -> str | None:
    """Keypad symbol for ``key`` under ``layout``, or ``None`` if it has none."""
    try:
        table = LAYOUTS[layout.upper()]
    except KeyError:
        raise ValueError(f"unknown layout {layout!r} (known: {', '.join(LAYOUTS)})") from None
    return table.get(key)


def next_layout(layout: str) -> str:
    names = list(LAYOUTS)
    return names[(names.index(layout.upper()) + 1) % len(names)]
