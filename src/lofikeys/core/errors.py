"""Exception types raised by lofikeys."""


class LofiKeysError(Exception):
    """Base class for all lofikeys errors."""


class InvalidMnemonicError(LofiKeysError, ValueError):
    """Raised when a candidate phrase is not a valid BIP39 mnemonic.

    Covers wrong word count, words missing from the wordlist, and checksum
    mismatch. The message says which check failed so it can be shown to the
    user as-is.
    """


class DecryptionError(LofiKeysError):
    """Raised when a sealed message cannot be opened.

    Either the message is too short to contain a nonce and a tag, or the
    authentication tag did not verify (wrong key or tampered data).
    """


class DeviceIdentityError(LofiKeysError):
    """Raised when the persisted device record is missing fields or corrupted."""
