"""Shared fixtures for lofikeys tests."""

from __future__ import annotations

import os

import pytest


class FixedRandom:
    """Deterministic SecureRandom stand-in that replays a byte pattern."""

    def __init__(self, pattern: bytes) -> None:
        self._pattern = pattern
        self.calls: list[int] = []

    def random_bytes(self, size: int) -> bytes:
        self.calls.append(size)
        repeated = self._pattern * (size // len(self._pattern) + 1)
        return repeated[:size]


@pytest.fixture
def key() -> bytes:
    """Generate a valid 32-byte key for testing."""
    return os.urandom(32)


@pytest.fixture
def zero_random() -> FixedRandom:
    """Random source that only returns zero bytes."""
    return FixedRandom(b"\x00")


@pytest.fixture
def make_random() -> type[FixedRandom]:
    """Factory for deterministic random sources."""
    return FixedRandom
