"""lofikeys - Mnemonic-based key management for local-first sync."""

__version__ = "0.1.0"
