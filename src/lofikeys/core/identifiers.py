"""Random identifiers: NanoIds and NodeIds.

- NanoId: 21 characters over the URL-safe nanoid alphabet, for general
  short unique tokens.
- NodeId: 16 lowercase hex characters, the replica address persisted once
  per device. Other replicas parse this exact format.
"""

from __future__ import annotations

import math
import re

from lofikeys.core.entropy import SecureRandom, default_random

NANOID_ALPHABET = "useandom-26T198340PX75pxJACKVERYMINDBUSHWOLF_GQZbfghjklqvwyzrict"
NANOID_SIZE = 21

NODE_ID_ALPHABET = "0123456789abcdef"
NODE_ID_SIZE = 16

_NANOID_CHARS = frozenset(NANOID_ALPHABET)
_NODE_ID_PATTERN = re.compile(r"[0-9a-f]{16}")


class NanoId(str):
    """A 21-character URL-safe random token."""

    __slots__ = ()

    def __new__(cls, value: str) -> NanoId:
        if len(value) != NANOID_SIZE or not _NANOID_CHARS.issuperset(value):
            raise ValueError(f"Invalid NanoId: {value!r}")
        return super().__new__(cls, value)


class NodeId(str):
    """A 16-character lowercase hex replica identifier."""

    __slots__ = ()

    def __new__(cls, value: str) -> NodeId:
        if not _NODE_ID_PATTERN.fullmatch(value):
            raise ValueError(f"Invalid NodeId: {value!r}")
        return super().__new__(cls, value)


class IdentifierGenerator:
    """Draws identifiers uniformly from fixed alphabets."""

    def __init__(self, random: SecureRandom | None = None) -> None:
        self._random = random or default_random()

    def custom(self, alphabet: str, size: int) -> str:
        """Generate a random string of size characters from alphabet.

        Each byte is masked down to the smallest power of two covering the
        alphabet and values past its end are rejected, so every character is
        equally likely.

        Args:
            alphabet: Between 1 and 256 distinct characters.
            size: Number of characters to draw.

        Returns:
            The generated string.

        Raises:
            ValueError: If alphabet is empty, too long or repeats a
                character, or size is not positive.
        """
        if not 0 < len(alphabet) <= 256:
            raise ValueError("Alphabet must contain between 1 and 256 characters")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError("Alphabet characters must be distinct")
        if size <= 0:
            raise ValueError(f"Size must be positive, got {size}")

        mask = (1 << ((len(alphabet) - 1) or 1).bit_length()) - 1
        # Over-draw so most calls need a single read from the random source
        step = math.ceil(1.6 * mask * size / len(alphabet))

        chars: list[str] = []
        while True:
            for byte in self._random.random_bytes(step):
                index = byte & mask
                if index < len(alphabet):
                    chars.append(alphabet[index])
                    if len(chars) == size:
                        return "".join(chars)

    def nanoid(self) -> NanoId:
        """Generate a 21-character NanoId."""
        return NanoId(self.custom(NANOID_ALPHABET, NANOID_SIZE))

    def node_id(self) -> NodeId:
        """Generate a 16-character lowercase hex NodeId."""
        return NodeId(self.custom(NODE_ID_ALPHABET, NODE_ID_SIZE))
