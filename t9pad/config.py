"""
t9pad.config
============
Loads and validates config.json.
Falls back to sane defaults if the file is missing or partially specified.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)

# The package ships a default config.json alongside this file.
_PACKAGE_DIR = Path(__file__).parent
_DEFAULT_CONFIG_PATH = _PACKAGE_DIR / "config.json"

ENV_CONFIG = "T9PAD_CONFIG"

DEFAULTS: dict = {
    "languages": ["en", "pl"],
    "language": "en",
    "mode": "multitap",
    "layout": "T9",
    "wordlist_dir": str(_PACKAGE_DIR / "wordlists"),
    "log_level": "INFO",
    "overlay": {
        "offset_x": 16,
        "offset_y": 24,
        "opacity": 0.93,
    },
}


def load_config(path: str | Path | None = None) -> dict:
    """
    Load configuration from a JSON file and merge with defaults.

    Resolution order (first found wins):
        1. Explicit ``path`` argument
        2. ``T9PAD_CONFIG`` environment variable
        3. ``config.json`` in the current working directory
        4. Packaged default ``t9pad/config.json``

    Returns a fully-populated config dict.
    """
    cfg = copy.deepcopy(DEFAULTS)

    candidates: list[Path] = []
    if path:
        candidates.append(Path(path))
    env_path = os.environ.get(ENV_CONFIG)
    if env_path:
        candidates.append(Path(env_path))
    candidates.append(Path.cwd() / "config.json")
    candidates.append(_DEFAULT_CONFIG_PATH)

    for candidate in candidates:
        if not candidate.exists():
            continue
        try:
            with open(candidate, "r", encoding="utf-8") as f:
                user = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("[T9] could not parse %s: %s", candidate, e)
            break
        user = {k: v for k, v in user.items() if not k.startswith("_")}
        if "overlay" in user:
            cfg["overlay"].update(user.pop("overlay"))
        cfg.update(user)
        if not Path(cfg["wordlist_dir"]).is_absolute():
            cfg["wordlist_dir"] = str(candidate.parent / cfg["wordlist_dir"])
        break   # stop at first found

    return cfg
