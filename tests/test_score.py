import math

import pytest

from passforge.charsets import CharacterClass
from passforge.errors import InvalidConfigError
from passforge.generator import GeneratorConfig
from passforge.score import estimate_entropy, score_password


def test_empty_password():
    result = score_password("")
    assert result["score"] == 0
    assert result["label"] == "-"


def test_weak_password():
    result = score_password("abc")
    assert result["score"] == 25
    assert result["label"] == "Weak"


def test_medium_password():
    # 8 chars (20) + lower + digit
    result = score_password("abcd1234")
    assert result["score"] == 50
    assert result["label"] == "Medium"


def test_strong_password():
    result = score_password("Abcdefgh1234")
    assert result["score"] == 75
    assert result["label"] == "Strong"


def test_very_strong_password():
    result = score_password("X7f!9Lq@2Vb#tR4s")
    assert result["score"] == 100
    assert result["label"] == "Very Strong"


def test_only_listed_specials_count():
    # "~" is not in the special alphabet
    assert score_password("abcdefgh~")["score"] == 35


def test_entropy_of_config():
    config = GeneratorConfig(length=10, enabled_classes={CharacterClass.DIGIT})
    assert estimate_entropy(config) == pytest.approx(10 * math.log2(10))


def test_entropy_rejects_bad_config():
    with pytest.raises(InvalidConfigError):
        estimate_entropy(GeneratorConfig(enabled_classes=frozenset()))
