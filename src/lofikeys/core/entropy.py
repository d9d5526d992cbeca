"""Secure random source capability.

Every component that needs randomness takes a ``SecureRandom`` in its
constructor instead of reaching for a global, so tests can pass a
deterministic stand-in.
"""

from __future__ import annotations

import os
from typing import Protocol


class SecureRandom(Protocol):
    """A cryptographically strong source of random bytes."""

    def random_bytes(self, size: int) -> bytes:
        """Return ``size`` random bytes."""
        ...


class OsRandom:
    """SecureRandom backed by the operating system CSPRNG.

    ``os.urandom`` is thread-safe. An ``OSError`` raised by it is not caught:
    without entropy no guarantee of this package holds.
    """

    def random_bytes(self, size: int) -> bytes:
        return os.urandom(size)


def default_random() -> SecureRandom:
    """Get the default random source."""
    return OsRandom()
