"""Mnemonic commands for the lofikeys CLI.

Commands:
- generate: Print a new 12-word mnemonic
- check: Validate a mnemonic
- seed: Print the BIP39 seed of a mnemonic
"""

from __future__ import annotations

import sys

import click

from lofikeys.client.cli.config import MNEMONIC_ENV
from lofikeys.core.bip39 import Bip39Service, Mnemonic
from lofikeys.core.errors import InvalidMnemonicError

mnemonic_option = click.option(
    "--mnemonic",
    "phrase",
    envvar=MNEMONIC_ENV,
    prompt="Enter mnemonic",
    hide_input=True,
    help=f"Mnemonic phrase (prompted if omitted, or read from ${MNEMONIC_ENV}).",
)


def parse_or_exit(phrase: str) -> Mnemonic:
    """Parse a phrase, exiting with status 1 if it is not a valid mnemonic."""
    try:
        return Bip39Service().parse(phrase)
    except InvalidMnemonicError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
def generate() -> None:
    """Generate a new 12-word mnemonic.

    WARNING: Anyone who sees this phrase can derive all of your keys.
    Write it down and keep it offline.
    """
    mnemonic = Bip39Service().generate()
    click.echo(str(mnemonic))


@click.command()
@mnemonic_option
def check(phrase: str) -> None:
    """Check that a mnemonic is valid (word count, wordlist and checksum)."""
    parse_or_exit(phrase)
    click.echo("Mnemonic is valid.")


@click.command()
@mnemonic_option
@click.option(
    "--passphrase",
    default="",
    help="Optional BIP39 passphrase.",
)
def seed(phrase: str, passphrase: str) -> None:
    """Print the 64-byte seed of a mnemonic as hex."""
    mnemonic = parse_or_exit(phrase)
    click.echo(Bip39Service().to_seed(mnemonic, passphrase).hex())
