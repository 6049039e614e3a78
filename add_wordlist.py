#!/usr/bin/env python3
"""
add_wordlist.py
===============
Helper utility: import an external word list into the t9pad wordlists
directory.  Words are copied as they are; ones with characters no key
carries stay in the list for multi-tap completion and are left out of the T9
trie when it is built.

The source must already be ordered by descending frequency; that order is
kept, since suggestions are ranked by position in the list.

Usage:
    python add_wordlist.py <lang_code> <source_file> [--append]

Examples:
    # Replace the Polish list
    python add_wordlist.py pl /path/to/polish_by_frequency.txt

    # Append new words after the existing English ones
    python add_wordlist.py en /path/to/extra_english.txt --append
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from t9pad.dictionary import DEFAULT_WORDLIST_DIR
from t9pad.keys import Language, encode_word


def read_words(path: Path) -> list[str]:
    words: list[str] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            w = line.strip()
            if w and not w.startswith("#"):
                words.append(w)
    return words


def merge_words(existing: list[str], new: list[str]) -> list[str]:
    """
    ``existing`` followed by the words of ``new`` not already in it.

    Every word is kept, even ones with characters no key carries: T9 lookup
    never offers them, but multi-tap completion still can.
    """
    seen = set(existing)
    merged = list(existing)
    for w in new:
        if w not in seen:
            seen.add(w)
            merged.append(w)
    return merged


def count_untypable(words: list[str]) -> int:
    return sum(1 for w in words if encode_word(w) is None)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Import a frequency-ordered word list into t9pad."
    )
    parser.add_argument(
        "lang", choices=[lang.value for lang in Language], help="Language code"
    )
    parser.add_argument("source", help="Path to source word list (.txt, one word per line)")
    parser.add_argument(
        "--append", action="store_true",
        help="Append to the existing wordlist instead of replacing it.",
    )
    parser.add_argument(
        "--dir", default=str(DEFAULT_WORDLIST_DIR), help="Wordlist directory"
    )
    args = parser.parse_args(argv)

    source_path = Path(args.source).resolve()
    if not source_path.exists():
        print(f"ERROR: Source file not found: {source_path}")
        sys.exit(1)

    wordlist_dir = Path(args.dir)
    dest_path = wordlist_dir / f"{args.lang}.txt"
    wordlist_dir.mkdir(parents=True, exist_ok=True)

    existing: list[str] = []
    if args.append and dest_path.exists():
        existing = read_words(dest_path)
        print(f"Existing words in {dest_path.name}: {len(existing):,}")

    print(f"Source : {source_path}")
    combined = merge_words(existing, read_words(source_path))
    untypable = count_untypable(combined)
    if untypable:
        print(f"  {untypable} word(s) contain characters no key carries; T9 will not offer them.")

    header = (
        f"# {args.lang} word list for t9pad\n"
        f"# Imported by add_wordlist.py\n"
        f"# Words: {len(combined):,}, most frequent first.\n"
        f"# One word per line. Lines starting with # are ignored.\n\n"
    )
    with open(dest_path, "w", encoding="utf-8") as f:
        f.write(header)
        for word in combined:
            f.write(word + "\n")

    print(f"Written : {dest_path}")
    print(f"Total   : {len(combined):,} words  (+{len(combined) - len(existing)} new)")


if __name__ == "__main__":
    main()
