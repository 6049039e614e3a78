from __future__ import annotations

import pytest

from t9pad.dictionary import Dictionaries
from t9pad.engine import PredictionEngine
from t9pad.keys import Language

EN_WORDS = [
    "the",
    "there",
    "then",
    "they",
    "good",
    "home",
    "gone",
    "hone",
    "Hello",
    "naïve",
    "in",
    "inside",
    "go",
]

PL_WORDS = ["że", "żeby", "dom", "domy", "ćma"]


@pytest.fixture
def wordlist_dir(tmp_path):
    (tmp_path / "en.txt").write_text("\n".join(EN_WORDS) + "\n", encoding="utf-8")
    (tmp_path / "pl.txt").write_text(
        "# header comment\n\n" + "\n".join(PL_WORDS) + "\n", encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def dicts(wordlist_dir):
    d = Dictionaries(wordlist_dir, [Language.EN, Language.PL])
    d.init()
    return d


@pytest.fixture
def engine(dicts):
    return PredictionEngine(dicts)
