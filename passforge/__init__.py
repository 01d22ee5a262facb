"""passforge: secure password generation."""

from .charsets import CharacterClass
from .errors import GenerationFailedError, InvalidConfigError, PassforgeError
from .generator import GeneratorConfig, generate, generate_many
from .randomness import SecureRandomSource, SystemRandomSource

__version__ = "0.1.0"
