"""
passforge.score
Strength meter for finished passwords, plus an entropy figure for configs.
"""

import math
from typing import Dict

from .charsets import ALPHABETS, CharacterClass
from .generator import GeneratorConfig, effective_alphabet, validate

SPECIAL_CHARS = ALPHABETS[CharacterClass.SPECIAL]

# (minimum score, label, color) from strongest to weakest
LEVELS = (
    (80, "Very Strong", "green"),
    (60, "Strong", "bright_green"),
    (40, "Medium", "yellow"),
    (0, "Weak", "red"),
)


def score_password(password: str) -> Dict:
    """
    Scores a password on a 0-100 scale: up to 40 points for length and 15
    for each character class present.
    """
    if not password:
        return {"password": password, "score": 0, "label": "-", "color": "grey50"}

    length = len(password)
    if length >= 16:
        score = 40
    elif length >= 12:
        score = 30
    elif length >= 8:
        score = 20
    else:
        score = 10

    if any("A" <= c <= "Z" for c in password):
        score += 15
    if any("a" <= c <= "z" for c in password):
        score += 15
    if any("0" <= c <= "9" for c in password):
        score += 15
    if any(c in SPECIAL_CHARS for c in password):
        score += 15

    for minimum, label, color in LEVELS:
        if score >= minimum:
            break

    return {
        "password": password,
        "score": score,
        "label": label,
        "color": color,
    }


def estimate_entropy(config: GeneratorConfig) -> float:
    """Bits of entropy of a uniform draw: length * log2(alphabet size)."""
    validate(config)
    return config.length * math.log2(len(effective_alphabet(config)))
