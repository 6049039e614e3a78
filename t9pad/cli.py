"""
t9pad.cli
=========
Command-line entry point.
Registered as the ``t9pad`` console script in pyproject.toml.

Usage:
    t9pad                        # start the overlay app
    t9pad --config /my/path.json # explicit config file
    t9pad --lang pl --mode t9    # override language / input mode
    t9pad --keys 8444330         # type keypad symbols, print the result, exit
    t9pad --list-langs           # show available wordlists and exit
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .keys import Language

ENV_LOG = "T9_LOG"


def _setup_logging(verbose: bool, config: dict) -> None:
    if verbose:
        level = "DEBUG"
    else:
        level = os.environ.get(ENV_LOG) or config.get("log_level", "INFO")
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(message)s",
    )


def _list_languages(wordlist_dir: str) -> None:
    wdir = Path(wordlist_dir)
    if not wdir.exists():
        print(f"Wordlist directory not found: {wdir}")
        return
    files = sorted(wdir.glob("*.txt"))
    if not files:
        print(f"No wordlists found in {wdir}")
        return
    known = {lang.value for lang in Language}
    print(f"Available languages in {wdir}:\n")
    for f in files:
        lines = sum(
            1 for ln in f.read_text(encoding="utf-8").splitlines()
            if ln.strip() and not ln.startswith("#")
        )
        note = "" if f.stem in known else "   (no key tables, ignored)"
        print(f"  {f.stem:<10}  {lines:>6,} words   ({f.name}){note}")
    print()


def _run_keys(config: dict, symbols: str) -> int:
    from .composer import Composer
    from .dictionary import Dictionaries
    from .engine import InputMode, PredictionEngine
    from .errors import InvalidInputError

    lang = Language.from_code(config["language"])
    dicts = Dictionaries(config["wordlist_dir"], [lang])
    dicts.init()
    composer = Composer(PredictionEngine(dicts), lang, InputMode.from_name(config["mode"]))

    try:
        for symbol in symbols:
            composer.press(symbol)
    except InvalidInputError as e:
        print(f"t9pad: {e}", file=sys.stderr)
        return 2

    print(f"text        : {composer.text!r}")
    for i, word in enumerate(composer.suggestions):
        marker = "▶" if i == composer.selected else " "
        print(f"  {marker} {i + 1}. {word}")
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="t9pad",
        description="Multi-tap and T9 predictive text on a 9-key keypad.",
    )
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="Path to a custom config.json (overrides default resolution order).",
    )
    parser.add_argument(
        "--lang", "-l",
        metavar="CODE",
        choices=[lang.value for lang in Language],
        help="Language to start in (overrides config).",
    )
    parser.add_argument(
        "--mode", "-m",
        choices=["multitap", "t9"],
        help="Input mode to start in (overrides config).",
    )
    parser.add_argument(
        "--keys", "-k",
        metavar="SYMBOLS",
        help="Feed keypad symbols (0-9, *, #), print text and suggestions, and exit.",
    )
    parser.add_argument(
        "--list-langs",
        action="store_true",
        help="List available wordlists and exit.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging.")
    args = parser.parse_args(argv)

    from .config import load_config

    config = load_config(args.config)
    _setup_logging(args.verbose, config)

    if args.list_langs:
        _list_languages(config["wordlist_dir"])
        sys.exit(0)

    if args.lang:
        config["language"] = args.lang
    if args.mode:
        config["mode"] = args.mode

    if args.keys is not None:
        sys.exit(_run_keys(config, args.keys))

    print("=" * 54)
    print("  t9pad — active")
    print("=" * 54)
    print(f"  Language  : {config['language']}   Mode : {config['mode']}")
    print(f"  Layout    : {config['layout']}")
    print("-" * 54)
    print("  1-9 : letter keys     0   : space / commit")
    print("  *   : next suggestion #   : backspace")
    print("  F8  : language        F9  : mode")
    print("  F10 : layout          Esc : hide overlay")
    print("=" * 54)
    print("  Press Ctrl+C to quit\n")

    # Imported late so --keys and --list-langs work without a display.
    from .app import T9App
    app = T9App(config)
    app.run()


if __name__ == "__main__":
    main()
