"""Core module - Mnemonics, key derivation, sealing and identifiers."""

from lofikeys.core.bip39 import WORDLIST, Bip39Service, Mnemonic
from lofikeys.core.entropy import OsRandom, SecureRandom, default_random
from lofikeys.core.errors import (
    DecryptionError,
    DeviceIdentityError,
    InvalidMnemonicError,
    LofiKeysError,
)
from lofikeys.core.identifiers import (
    NANOID_ALPHABET,
    NODE_ID_ALPHABET,
    IdentifierGenerator,
    NanoId,
    NodeId,
)
from lofikeys.core.secretbox import (
    KEY_SIZE,
    MIN_CIPHERTEXT_SIZE,
    NONCE_SIZE,
    NaclSecretBox,
    SecretBoxCipher,
    SecretBoxCodec,
)
from lofikeys.core.slip21 import HmacSha512, Slip21Deriver, hmac_sha512

__all__ = [
    # BIP39
    "WORDLIST",
    "Bip39Service",
    "Mnemonic",
    # Entropy
    "OsRandom",
    "SecureRandom",
    "default_random",
    # Errors
    "DecryptionError",
    "DeviceIdentityError",
    "InvalidMnemonicError",
    "LofiKeysError",
    # Identifiers
    "NANOID_ALPHABET",
    "NODE_ID_ALPHABET",
    "IdentifierGenerator",
    "NanoId",
    "NodeId",
    # Secretbox
    "KEY_SIZE",
    "MIN_CIPHERTEXT_SIZE",
    "NONCE_SIZE",
    "NaclSecretBox",
    "SecretBoxCipher",
    "SecretBoxCodec",
    # SLIP-21
    "HmacSha512",
    "Slip21Deriver",
    "hmac_sha512",
]
