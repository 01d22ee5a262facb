"""
passforge.randomness
Secure random sources and unbiased index selection.

The generator only ever asks a source for 32-bit unsigned integers. Anything
with a `next_uniform32()` method will do, which keeps tests deterministic.
"""

import secrets
from typing import Protocol

RANGE_32 = 1 << 32


class SecureRandomSource(Protocol):
    def next_uniform32(self) -> int:
        """Return an integer uniformly distributed over [0, 2**32)."""
        ...


class SystemRandomSource:
    """Random source backed by the operating system CSPRNG via `secrets`."""

    def next_uniform32(self) -> int:
        return secrets.randbits(32)


def uniform_index(source: SecureRandomSource, n: int) -> int:
    """
    Return a uniform integer in [0, n) using rejection sampling.

    Draws that fall in the tail above the largest multiple of n that fits in
    the 32-bit range are thrown away, so every index is equally likely.
    """
    if n < 1 or n > RANGE_32:
        raise ValueError(f"n must be in [1, 2**32], got {n}")
    limit = RANGE_32 - (RANGE_32 % n)
    while True:
        value = source.next_uniform32()
        if not 0 <= value < RANGE_32:
            raise ValueError(f"random source returned {value}, outside the 32-bit range")
        if value < limit:
            return value % n
