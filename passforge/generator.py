"""
passforge.generator
Secure password synthesis.

A password is drawn character by character from the effective alphabet and
accepted only if every enabled character class shows up at least once.
Unlucky draws are thrown away whole and redrawn, up to MAX_ATTEMPTS times.
"""

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional

from .charsets import CLASS_ORDER, CharacterClass, alphabet_for, parse_class
from .errors import GenerationFailedError, InvalidConfigError
from .randomness import SecureRandomSource, SystemRandomSource, uniform_index

logger = logging.getLogger(__name__)

MIN_LENGTH = 4
MAX_LENGTH = 128
MAX_ATTEMPTS = 1000
MAX_COUNT = 50
DEFAULT_LENGTH = 16


@dataclass(frozen=True)
class GeneratorConfig:
    length: int = DEFAULT_LENGTH
    enabled_classes: FrozenSet[CharacterClass] = field(default_factory=lambda: frozenset(CLASS_ORDER))
    exclude_ambiguous: bool = False

    def __post_init__(self):
        # accept any iterable of classes but always store a frozenset
        if not isinstance(self.enabled_classes, frozenset):
            try:
                classes = frozenset(self.enabled_classes)
            except TypeError:
                raise InvalidConfigError(
                    f"enabled_classes must be a collection of character classes, got {self.enabled_classes!r}"
                ) from None
            object.__setattr__(self, "enabled_classes", classes)

    @classmethod
    def from_flags(
        cls,
        length: int = DEFAULT_LENGTH,
        upper: bool = True,
        lower: bool = True,
        digits: bool = True,
        special: bool = True,
        exclude_ambiguous: bool = False,
    ) -> "GeneratorConfig":
        """Build a config from the on/off options a form or command line exposes."""
        for name, value in (("upper", upper), ("lower", lower), ("digits", digits),
                            ("special", special), ("exclude_ambiguous", exclude_ambiguous)):
            if not isinstance(value, bool):
                raise InvalidConfigError(f"{name} must be true or false, got {value!r}")
        flags = (
            (upper, CharacterClass.UPPERCASE),
            (lower, CharacterClass.LOWERCASE),
            (digits, CharacterClass.DIGIT),
            (special, CharacterClass.SPECIAL),
        )
        enabled = frozenset(c for on, c in flags if on)
        return cls(length=length, enabled_classes=enabled, exclude_ambiguous=exclude_ambiguous)

    def class_alphabets(self) -> List[str]:
        """Filtered alphabets of the enabled classes, in fixed class order."""
        return [alphabet_for(c, self.exclude_ambiguous) for c in CLASS_ORDER if c in self.enabled_classes]


def effective_alphabet(config: GeneratorConfig) -> str:
    return "".join(config.class_alphabets())


def validate(config: GeneratorConfig) -> None:
    """
    Raise InvalidConfigError if `config` can never yield a valid password.
    """
    length = config.length
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidConfigError(f"length must be an integer, got {length!r}")
    if length < MIN_LENGTH or length > MAX_LENGTH:
        raise InvalidConfigError(f"length must be between {MIN_LENGTH} and {MAX_LENGTH}, got {length}")
    if not isinstance(config.exclude_ambiguous, bool):
        raise InvalidConfigError(f"exclude_ambiguous must be true or false, got {config.exclude_ambiguous!r}")
    if not config.enabled_classes:
        raise InvalidConfigError("at least one character class must be enabled")
    for c in config.enabled_classes:
        if not isinstance(c, CharacterClass):
            raise InvalidConfigError(f"not a character class: {c!r}")
        if not alphabet_for(c, config.exclude_ambiguous):
            raise InvalidConfigError(f"{c.value} alphabet is empty after removing ambiguous characters")
    if not effective_alphabet(config):
        raise InvalidConfigError("effective alphabet is empty")
    if length < len(config.enabled_classes):
        raise InvalidConfigError(
            f"length {length} is too short for {len(config.enabled_classes)} required character classes"
        )


def satisfies(password: str, config: GeneratorConfig) -> bool:
    """True if `password` holds at least one character of every enabled class."""
    return _covers(password, config.class_alphabets())


def _covers(password: str, requirements: List[str]) -> bool:
    return all(any(ch in chars for ch in password) for chars in requirements)


def _draw(alphabet: str, length: int, source: SecureRandomSource) -> str:
    n = len(alphabet)
    return "".join(alphabet[uniform_index(source, n)] for _ in range(length))


def generate(config: GeneratorConfig, random_source: Optional[SecureRandomSource] = None) -> str:
    """
    Generate a password for `config`.

    Raises InvalidConfigError for unusable configs and GenerationFailedError
    when MAX_ATTEMPTS draws in a row miss one of the enabled classes.
    """
    validate(config)
    source = random_source if random_source is not None else SystemRandomSource()
    alphabet = effective_alphabet(config)
    requirements = config.class_alphabets()

    for attempt in range(1, MAX_ATTEMPTS + 1):
        candidate = _draw(alphabet, config.length, source)
        if _covers(candidate, requirements):
            if attempt > 1:
                logger.debug("password accepted on attempt %d", attempt)
            return candidate
        logger.debug("attempt %d missed a required class, redrawing", attempt)

    logger.warning("giving up after %d attempts (length=%d, classes=%d)",
                   MAX_ATTEMPTS, config.length, len(requirements))
    raise GenerationFailedError(MAX_ATTEMPTS)


def generate_many(
    config: GeneratorConfig,
    count: int,
    random_source: Optional[SecureRandomSource] = None,
) -> List[str]:
    """Generate `count` independent passwords with the same config."""
    if isinstance(count, bool) or not isinstance(count, int) or not 1 <= count <= MAX_COUNT:
        raise InvalidConfigError(f"count must be between 1 and {MAX_COUNT}, got {count!r}")
    source = random_source if random_source is not None else SystemRandomSource()
    return [generate(config, source) for _ in range(count)]


def config_from_names(
    length: int,
    class_names: Iterable[str],
    exclude_ambiguous: bool = False,
) -> GeneratorConfig:
    """Build a config from class names such as "upper" or "digits"."""
    return GeneratorConfig(
        length=length,
        enabled_classes=frozenset(parse_class(n) for n in class_names),
        exclude_ambiguous=exclude_ambiguous,
    )
