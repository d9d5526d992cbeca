"""BIP39 mnemonic handling.

This module provides:
- The Mnemonic type (a validated 12-word phrase)
- Mnemonic generation from 128 bits of entropy
- Parsing and checksum validation of user input
- Seed stretching with PBKDF2-HMAC-SHA512

Reference: https://github.com/bitcoin/bips/blob/master/bip-0039.mediawiki
"""

from __future__ import annotations

import logging
import unicodedata

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from mnemonic import Mnemonic as ReferenceMnemonic

from lofikeys.core.entropy import SecureRandom, default_random
from lofikeys.core.errors import InvalidMnemonicError

logger = logging.getLogger(__name__)

ENTROPY_SIZE = 16  # 128 bits
WORD_COUNT = 12

SEED_SIZE = 64
PBKDF2_ROUNDS = 2048
SALT_PREFIX = "mnemonic"

_REFERENCE = ReferenceMnemonic("english")
WORDLIST: tuple[str, ...] = tuple(_REFERENCE.wordlist)
_WORDS = frozenset(WORDLIST)


def _decode_words(words: list[str]) -> bytes:
    """Decode words back to entropy, validating count, membership and checksum."""
    if len(words) != WORD_COUNT:
        raise InvalidMnemonicError(f"Expected {WORD_COUNT} words, got {len(words)}")

    for position, word in enumerate(words, start=1):
        if word not in _WORDS:
            raise InvalidMnemonicError(f"Word {position} is not in the BIP39 wordlist")

    try:
        return bytes(_REFERENCE.to_entropy(words))
    except ValueError as e:
        raise InvalidMnemonicError("Invalid mnemonic checksum") from e


class Mnemonic(str):
    """A 12-word BIP39 mnemonic whose checksum has been verified.

    The constructor expects the canonical form (lowercase words separated by
    single spaces) and raises InvalidMnemonicError for anything else, so an
    invalid Mnemonic cannot exist. Use Bip39Service.parse() for user input.
    """

    __slots__ = ()

    def __new__(cls, phrase: str) -> Mnemonic:
        _decode_words(phrase.split(" "))
        return super().__new__(cls, phrase)

    @property
    def words(self) -> tuple[str, ...]:
        return tuple(self.split(" "))

    def __repr__(self) -> str:
        # Never echo the phrase itself into logs or tracebacks
        return "Mnemonic(<redacted>)"


class Bip39Service:
    """Generates, parses and stretches 12-word BIP39 mnemonics."""

    def __init__(self, random: SecureRandom | None = None) -> None:
        self._random = random or default_random()

    def generate(self) -> Mnemonic:
        """Generate a new mnemonic from 128 bits of fresh entropy.

        Returns:
            A valid 12-word Mnemonic.
        """
        return self.from_entropy(self._random.random_bytes(ENTROPY_SIZE))

    def from_entropy(self, entropy: bytes) -> Mnemonic:
        """Encode exactly 16 bytes of entropy as a mnemonic.

        Args:
            entropy: 128 bits of entropy.

        Returns:
            The Mnemonic encoding entropy plus its 4-bit checksum.

        Raises:
            ValueError: If entropy is not 16 bytes long.
        """
        if len(entropy) != ENTROPY_SIZE:
            raise ValueError(f"Entropy must be {ENTROPY_SIZE} bytes, got {len(entropy)}")

        return Mnemonic(_REFERENCE.to_mnemonic(bytes(entropy)))

    def to_entropy(self, mnemonic: Mnemonic) -> bytes:
        """Get the 16 entropy bytes encoded by a mnemonic."""
        return _decode_words(list(mnemonic.words))

    def parse(self, candidate: str) -> Mnemonic:
        """Validate user input and turn it into a Mnemonic.

        Surrounding and repeated whitespace and letter case are ignored.

        Args:
            candidate: The phrase as typed by the user.

        Returns:
            The validated Mnemonic in canonical form.

        Raises:
            InvalidMnemonicError: On wrong word count, unknown word or
                checksum mismatch.
        """
        words = unicodedata.normalize("NFKD", candidate).lower().split()
        _decode_words(words)
        return Mnemonic(" ".join(words))

    def to_seed(self, mnemonic: Mnemonic, passphrase: str = "") -> bytes:
        """Stretch a mnemonic into a 64-byte seed.

        Args:
            mnemonic: A validated Mnemonic.
            passphrase: Optional BIP39 passphrase ("" reproduces the plain seed).

        Returns:
            64 bytes of seed material. Deterministic in both arguments.
        """
        password = unicodedata.normalize("NFKD", str(mnemonic)).encode("utf-8")
        salt = unicodedata.normalize("NFKD", SALT_PREFIX + passphrase).encode("utf-8")
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA512(),
            length=SEED_SIZE,
            salt=salt,
            iterations=PBKDF2_ROUNDS,
        )
        seed = kdf.derive(password)
        logger.debug("Derived %d-byte seed (passphrase: %s)", len(seed), bool(passphrase))
        return seed
