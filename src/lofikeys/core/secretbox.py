"""Authenticated encryption with XSalsa20-Poly1305.

Sealed messages use the NaCl/libsodium secretbox layout:

    nonce (24 bytes) || ciphertext || Poly1305 tag (16 bytes)

so they can be opened by any secretbox implementation.
"""

from __future__ import annotations

import logging
from typing import Protocol

from nacl.exceptions import CryptoError
from nacl.secret import SecretBox

from lofikeys.core.entropy import SecureRandom, default_random
from lofikeys.core.errors import DecryptionError

logger = logging.getLogger(__name__)

KEY_SIZE = SecretBox.KEY_SIZE  # 32
NONCE_SIZE = SecretBox.NONCE_SIZE  # 24
MAC_SIZE = SecretBox.MACBYTES  # 16
MIN_CIPHERTEXT_SIZE = NONCE_SIZE + MAC_SIZE


class SecretBoxCipher(Protocol):
    """XSalsa20-Poly1305 primitive without nonce framing."""

    def encrypt(self, key: bytes, nonce: bytes, plaintext: bytes) -> bytes:
        """Return ciphertext || tag."""
        ...

    def decrypt(self, key: bytes, nonce: bytes, body: bytes) -> bytes:
        """Return the plaintext or raise DecryptionError."""
        ...


class NaclSecretBox:
    """SecretBoxCipher backed by PyNaCl (libsodium)."""

    def encrypt(self, key: bytes, nonce: bytes, plaintext: bytes) -> bytes:
        return SecretBox(key).encrypt(plaintext, nonce).ciphertext

    def decrypt(self, key: bytes, nonce: bytes, body: bytes) -> bytes:
        try:
            return SecretBox(key).decrypt(body, nonce)
        except CryptoError as e:
            raise DecryptionError("Authentication failed: wrong key or tampered data") from e


def _check_key(key: bytes) -> bytes:
    if len(key) != KEY_SIZE:
        raise ValueError(f"Key must be {KEY_SIZE} bytes, got {len(key)}")
    return bytes(key)


class SecretBoxCodec:
    """Seals and opens payloads under a 32-byte subkey.

    Every seal draws a fresh random 192-bit nonce, so the same plaintext
    never seals to the same bytes twice.
    """

    def __init__(
        self,
        cipher: SecretBoxCipher | None = None,
        random: SecureRandom | None = None,
    ) -> None:
        self._cipher = cipher or NaclSecretBox()
        self._random = random or default_random()

    def seal(self, key: bytes, plaintext: bytes) -> bytes:
        """Encrypt and authenticate plaintext.

        Args:
            key: 32-byte subkey.
            plaintext: Data to protect (may be empty).

        Returns:
            nonce (24 bytes) || ciphertext || tag (16 bytes)
        """
        key = _check_key(key)
        nonce = self._random.random_bytes(NONCE_SIZE)
        sealed = nonce + self._cipher.encrypt(key, nonce, bytes(plaintext))
        logger.debug("Sealed %d bytes into %d", len(plaintext), len(sealed))
        return sealed

    def open(self, key: bytes, ciphertext: bytes) -> bytes:
        """Verify and decrypt a sealed message.

        Args:
            key: 32-byte subkey the message was sealed with.
            ciphertext: Output of seal().

        Returns:
            The original plaintext.

        Raises:
            DecryptionError: If the message is shorter than 40 bytes or the
                authentication tag does not verify.
        """
        key = _check_key(key)
        ciphertext = bytes(ciphertext)
        if len(ciphertext) < MIN_CIPHERTEXT_SIZE:
            raise DecryptionError(
                f"Ciphertext too short: {len(ciphertext)} bytes, "
                f"need at least {MIN_CIPHERTEXT_SIZE}"
            )
        nonce = ciphertext[:NONCE_SIZE]
        body = ciphertext[NONCE_SIZE:]
        try:
            return self._cipher.decrypt(key, nonce, body)
        except DecryptionError:
            logger.debug("Rejected %d-byte message: authentication failed", len(ciphertext))
            raise
