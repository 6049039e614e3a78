"""
t9pad.overlay
=============
Frameless floating overlay window (tkinter).
Shows the pending key presses and the three suggestion slots near the cursor.
"""

from __future__ import annotations

import tkinter as tk
from collections.abc import Sequence

_BG = "#1a2232"
_FG = "#a0a0c0"
_ACCENT = "#4a9eff"
_SELECTED_BG = "#e94560"
_FONT = "Courier New"


class OverlayWindow:
    """
    A small always-on-top window with a status row (language, mode, layout
    and the pending key symbols) above one row per suggestion slot.
    """

    def __init__(self, root: tk.Tk, overlay_cfg: dict) -> None:
        self.root = root
        self.cfg = overlay_cfg
        self._slot_labels: list[tk.Label] = []
        self._build()

    def _build(self) -> None:
        self.win = tk.Toplevel(self.root)
        self.win.withdraw()
        self.win.overrideredirect(True)
        self.win.attributes("-topmost", True)
        self.win.attributes("-alpha", self.cfg.get("opacity", 0.93))

        self.frame = tk.Frame(self.win, bg=_BG, padx=14, pady=8)
        self.frame.pack(fill="both", expand=True)

        self.status_label = tk.Label(
            self.frame, text="", bg=_BG, fg=_ACCENT,
            font=(_FONT, 10, "bold"), anchor="w",
        )
        self.status_label.pack(fill="x")

        slots = tk.Frame(self.frame, bg=_BG)
        slots.pack(fill="x", pady=(4, 0))
        for _ in range(3):
            lbl = tk.Label(slots, text="", bg=_BG, fg=_FG, font=(_FONT, 12), anchor="w", padx=6)
            lbl.pack(fill="x", pady=1)
            self._slot_labels.append(lbl)

    def _reposition(self) -> None:
        try:
            cx, cy = self.root.winfo_pointerx(), self.root.winfo_pointery()
        except tk.TclError:
            cx, cy = 100, 100
        ox = self.cfg.get("offset_x", 16)
        oy = self.cfg.get("offset_y", 24)
        self.win.geometry(f"+{cx + ox}+{cy + oy}")

    def _show(self) -> None:
        self._reposition()
        self.win.deiconify()
        self.win.lift()

    # ── Public API ────────────────────────────────────────────────────────────

    def update(
        self,
        status: str,
        pending: str,
        suggestions: Sequence[str],
        selected: int,
    ) -> None:
        """Refresh content and show the overlay near the cursor."""
        self.status_label.config(text=f"{status}   {pending}▸" if pending else status)
        for i, (lbl, word) in enumerate(zip(self._slot_labels, suggestions)):
            is_sel = i == selected
            lbl.config(
                text=f"{'▶ ' if is_sel else '   '}{word}",
                bg=_SELECTED_BG if is_sel else _BG,
                fg="#ffffff" if is_sel else _FG,
                font=(_FONT, 12, "bold" if is_sel else "normal"),
            )
        self._show()

    def hide(self) -> None:
        self.win.withdraw()

    def show_toast(self, message: str) -> None:
        """Flash a one-line status message, e.g. after switching language."""
        self.status_label.config(text=f"✓ {message}")
        for lbl in self._slot_labels:
            lbl.config(text="", bg=_BG)
        self._show()
