"""
t9pad.app
=========
Main application class: wires together the keyboard listener, the
composer and the overlay window.
"""

from __future__ import annotations

import logging
import tkinter as tk

try:
    from pynput import keyboard
    from pynput.keyboard import Controller, Key, KeyCode
except ImportError as exc:
    raise ImportError(
        "pynput is required.\n"
        "Install it with:  pip install pynput\n"
        "Or, from the repo:  pip install -e ."
    ) from exc

from .composer import Composer
from .dictionary import Dictionaries
from .engine import InputMode, PredictionEngine
from .errors import InvalidInputError
from .keys import Language
from .layouts import next_layout, translate
from .overlay import OverlayWindow

log = logging.getLogger(__name__)

# Windows virtual key codes for the numeric pad.
_VK_MAP: dict[int, str] = {
    96: "0", 97: "1", 98: "2", 99: "3", 100: "4",
    101: "5", 102: "6", 103: "7", 104: "8", 105: "9",
    106: "*", 110: ".", 13: "Enter",
}

_NAMED: dict[Key, str] = {
    Key.enter: "Enter",
    Key.f8: "cycle_language",
    Key.f9: "cycle_mode",
    Key.f10: "cycle_layout",
    Key.esc: "hide",
}


class T9App:
    """
    Full application.  Instantiate then call :meth:`run`.

    Example::

        from t9pad import T9App, load_config
        app = T9App(load_config())
        app.run()
    """

    def __init__(self, config: dict) -> None:
        self.config = config
        langs = [Language.from_code(c) for c in config.get("languages", ["en", "pl"])]
        start_lang = Language.from_code(config.get("language", "en"))
        if start_lang not in langs:
            raise ValueError(
                f"start language {start_lang.value!r} is not in configured languages "
                f"{[lang.value for lang in langs]}"
            )
        self.dictionaries = Dictionaries(config.get("wordlist_dir"), langs)
        # Build in the background while the window comes up.
        self._init_worker = self.dictionaries.start()

        self.composer = Composer(
            PredictionEngine(self.dictionaries),
            start_lang,
            InputMode.from_name(config.get("mode", "multitap")),
        )
        self.layout: str = config.get("layout", "T9").upper()
        self.kb = Controller()

        self.root = tk.Tk()
        self.root.withdraw()
        self.root.title("t9pad")

        self.overlay = OverlayWindow(self.root, config.get("overlay", {}))

        self._listener = keyboard.Listener(on_press=self._on_press, suppress=False)

    # ── Key dispatch (listener thread → Tk main thread) ──────────────────────

    def _on_press(self, key: Key | KeyCode | None) -> None:
        name = self._key_name(key)
        if name:
            self.root.after(0, self._handle, name)

    @staticmethod
    def _key_name(key: Key | KeyCode | None) -> str | None:
        if isinstance(key, Key):
            return _NAMED.get(key)
        if isinstance(key, KeyCode):
            if key.char:
                return key.char
            vk = getattr(key, "vk", None)
            if vk is not None:
                return _VK_MAP.get(vk)
        return None

    # ── Action handler (always runs on Tk main thread) ────────────────────────

    def _handle(self, name: str) -> None:
        c = self.composer

        if name == "cycle_language":
            self.overlay.show_toast(f"Language: {c.cycle_language().value.upper()}")
            return
        if name == "cycle_mode":
            self.overlay.show_toast(f"Mode: {c.cycle_mode().value.upper()}")
            return
        if name == "cycle_layout":
            self.layout = next_layout(self.layout)
            self.overlay.show_toast(f"Layout: {self.layout}")
            return
        if name == "hide":
            self.overlay.hide()
            return

        symbol = translate(self.layout, name)
        if symbol is None:
            return

        if self._init_worker is not None:
            self._init_worker.join()
            self._init_worker = None

        before = c.text
        try:
            c.press(symbol)
        except InvalidInputError as e:
            log.debug("[T9] ignored key: %s", e)
            return

        if c.text.startswith(before):
            self._type(c.text[len(before):])
        else:
            self._erase(len(before) - len(c.text))
        self._refresh()

    # ── Typing helpers ────────────────────────────────────────────────────────

    def _type(self, text: str) -> None:
        if not text:
            return
        try:
            self.kb.type(text)
        except Exception as ex:
            log.error("[T9] Type error: %s", ex)

    def _erase(self, count: int) -> None:
        try:
            for _ in range(count):
                self.kb.tap(Key.backspace)
        except Exception as ex:
            log.error("[T9] Tap error: %s", ex)

    def _refresh(self) -> None:
        c = self.composer
        if not c.session.has_input:
            self.overlay.hide()
            return
        status = f"{c.lang.value.upper()} · {c.mode.value.upper()} · {self.layout}"
        pending = "".join(k.symbol for k in c.session.buffer)
        self.overlay.update(status, pending, c.suggestions, c.selected)

    # ── Run ───────────────────────────────────────────────────────────────────

    def _poll_signals(self) -> None:
        """
        Called every 200ms on the Tk main thread.
        Tkinter's mainloop() blocks Python-level signal delivery entirely,
        so Ctrl+C never fires without this periodic re-entry into Python.
        """
        if self._stop:
            self.root.destroy()
            return
        self.root.after(200, self._poll_signals)

    def stop(self) -> None:
        self._stop = True

    def run(self) -> None:
        """Start the keyboard listener and enter the Tk event loop."""
        import signal

        self._stop = False

        def _sigint_handler(sig, frame):
            self._stop = True

        signal.signal(signal.SIGINT, _sigint_handler)

        self._listener.start()
        self.root.after(200, self._poll_signals)
        self.root.mainloop()
        self._listener.stop()
        log.info("[T9] Stopped.")
