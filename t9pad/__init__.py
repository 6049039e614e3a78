"""
t9pad
=====
Multi-tap and T9 predictive text entry for a 9-key phone keypad.

Public API
----------
    from t9pad import KeyClass, Language, PredictionEngine, init, default_engine

    init()
    engine = default_engine()
    engine.t9([KeyClass.TUV, KeyClass.GHI, KeyClass.DEF], Language.EN)
    # ('the', 'they', 'there')
    engine.multitap([KeyClass.GHI, KeyClass.GHI], Language.EN)
    # ('h', 'he', 'his')
"""

from .composer import Composer
from .config import load_config
from .dictionary import Dictionaries, init, load_wordlist
from .engine import EMPTY_SUGGESTIONS, InputMode, PredictionEngine, default_engine
from .errors import (
    DictionaryNotInitializedError,
    InvalidInputError,
    NotWordInputError,
    T9Error,
    UnmappedCharacterError,
)
from .keys import Control, KeyClass, Language, classify_char, classify_input
from .multitap import decode
from .session import InputSession

__all__ = [
    "Composer",
    "Control",
    "Dictionaries",
    "DictionaryNotInitializedError",
    "EMPTY_SUGGESTIONS",
    "InputMode",
    "InputSession",
    "InvalidInputError",
    "KeyClass",
    "Language",
    "NotWordInputError",
    "PredictionEngine",
    "T9Error",
    "UnmappedCharacterError",
    "classify_char",
    "classify_input",
    "decode",
    "default_engine",
    "init",
    "load_config",
    "load_wordlist",
]
__version__ = "1.0.0"
