"""
passforge.errors
Exceptions raised by the password generator.
"""


class PassforgeError(Exception):
    """Base class for all passforge errors."""


class InvalidConfigError(PassforgeError, ValueError):
    """The generator configuration can never produce a valid password."""


class GenerationFailedError(PassforgeError, RuntimeError):
    """Every attempt to draw a password satisfying the enabled classes failed."""

    def __init__(self, attempts: int):
        super().__init__(f"no password satisfied the enabled classes after {attempts} attempts")
        self.attempts = attempts
