"""SLIP-21 symmetric key derivation.

Reference: https://github.com/satoshilabs/slips/blob/master/slip-0021.md
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac

logger = logging.getLogger(__name__)

ROOT_KEY = b"Symmetric key seed"
NODE_SIZE = 64
SUBKEY_SIZE = 32


class HmacSha512(Protocol):
    """MAC capability used by the deriver."""

    def __call__(self, key: bytes, data: bytes) -> bytes: ...


def hmac_sha512(key: bytes, data: bytes) -> bytes:
    """Compute HMAC-SHA512 with the cryptography backend."""
    mac = crypto_hmac.HMAC(key, hashes.SHA512())
    mac.update(data)
    return mac.finalize()


class Slip21Deriver:
    """Derives 32-byte subkeys from a seed and a path of string labels.

    Each node is 64 bytes: the left half keys the derivation of its children,
    the right half is the node's key.
    """

    def __init__(self, mac: HmacSha512 | None = None) -> None:
        self._mac = mac or hmac_sha512

    def master_node(self, seed: bytes) -> bytes:
        """Get the 64-byte root node for a seed."""
        return self._mac(ROOT_KEY, seed)

    def derive(self, seed: bytes, path: Sequence[str]) -> bytes:
        """Derive the subkey at path.

        Args:
            seed: Seed bytes (usually the 64-byte BIP39 seed).
            path: Labels in order, e.g. ["SLIP-0021", "Master encryption key"].
                An empty path yields the master node key.

        Returns:
            32-byte subkey.
        """
        if isinstance(path, str):
            raise TypeError("path must be a sequence of labels, not a single string")

        node = self.master_node(seed)
        for label in path:
            node = self._mac(node[:SUBKEY_SIZE], b"\x00" + label.encode("utf-8"))

        logger.debug("Derived subkey at depth %d", len(path))
        return node[SUBKEY_SIZE:NODE_SIZE]
