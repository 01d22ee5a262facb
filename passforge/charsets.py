"""
passforge.charsets
Character classes and their fixed alphabets.
"""

from enum import Enum
from typing import Dict

from .errors import InvalidConfigError


class CharacterClass(Enum):
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digit"
    SPECIAL = "special"


ALPHABETS: Dict[CharacterClass, str] = {
    CharacterClass.UPPERCASE: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    CharacterClass.LOWERCASE: "abcdefghijklmnopqrstuvwxyz",
    CharacterClass.DIGIT: "0123456789",
    CharacterClass.SPECIAL: "!@#$%^&*-=+_?",
}

# order in which enabled alphabets are concatenated
CLASS_ORDER = (
    CharacterClass.UPPERCASE,
    CharacterClass.LOWERCASE,
    CharacterClass.DIGIT,
    CharacterClass.SPECIAL,
)

# visually similar characters, dropped when exclude_ambiguous is set
AMBIGUOUS_CHARS = "0O1lI"

_ALIASES: Dict[str, CharacterClass] = {
    "upper": CharacterClass.UPPERCASE,
    "uppercase": CharacterClass.UPPERCASE,
    "lower": CharacterClass.LOWERCASE,
    "lowercase": CharacterClass.LOWERCASE,
    "digit": CharacterClass.DIGIT,
    "digits": CharacterClass.DIGIT,
    "number": CharacterClass.DIGIT,
    "numbers": CharacterClass.DIGIT,
    "special": CharacterClass.SPECIAL,
    "symbol": CharacterClass.SPECIAL,
    "symbols": CharacterClass.SPECIAL,
}


def alphabet_for(cls: CharacterClass, exclude_ambiguous: bool = False) -> str:
    """Return the alphabet of `cls`, without ambiguous characters if requested."""
    chars = ALPHABETS[cls]
    if exclude_ambiguous:
        chars = "".join(c for c in chars if c not in AMBIGUOUS_CHARS)
    return chars


def parse_class(name: str) -> CharacterClass:
    key = name.strip().lower()
    try:
        return _ALIASES[key]
    except KeyError:
        raise InvalidConfigError(f"unknown character class: {name!r}") from None
