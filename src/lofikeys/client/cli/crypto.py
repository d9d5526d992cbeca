"""Key derivation and sealing commands for the lofikeys CLI.

Commands:
- derive: Print the SLIP-21 subkey at a path
- seal: Encrypt data under a derived subkey
- open: Decrypt data sealed under a derived subkey

The subkey is always derived from the mnemonic: the path labels given with
--path select it, in order.
"""

from __future__ import annotations

import base64
import binascii
import sys
from typing import BinaryIO, TextIO

import click

from lofikeys.client.cli.mnemonic import mnemonic_option, parse_or_exit
from lofikeys.core.bip39 import Bip39Service
from lofikeys.core.errors import DecryptionError
from lofikeys.core.secretbox import SecretBoxCodec
from lofikeys.core.slip21 import Slip21Deriver

path_option = click.option(
    "--path",
    "-p",
    "labels",
    multiple=True,
    help="SLIP-21 path label (repeat for each level).",
)
passphrase_option = click.option(
    "--passphrase",
    default="",
    help="Optional BIP39 passphrase.",
)


def derive_subkey(phrase: str, passphrase: str, labels: tuple[str, ...]) -> bytes:
    """Derive the subkey for the given mnemonic, passphrase and path."""
    mnemonic = parse_or_exit(phrase)
    seed_bytes = Bip39Service().to_seed(mnemonic, passphrase)
    return Slip21Deriver().derive(seed_bytes, labels)


@click.command()
@mnemonic_option
@passphrase_option
@path_option
def derive(phrase: str, passphrase: str, labels: tuple[str, ...]) -> None:
    """Print the 32-byte subkey at --path as hex."""
    click.echo(derive_subkey(phrase, passphrase, labels).hex())


@click.command("seal")
@mnemonic_option
@passphrase_option
@path_option
@click.argument("source", type=click.File("rb"), default="-")
def seal_cmd(
    phrase: str,
    passphrase: str,
    labels: tuple[str, ...],
    source: BinaryIO,
) -> None:
    """Seal SOURCE (default: stdin) and print the result as base64."""
    key = derive_subkey(phrase, passphrase, labels)
    sealed = SecretBoxCodec().seal(key, source.read())
    click.echo(base64.b64encode(sealed).decode())


@click.command("open")
@mnemonic_option
@passphrase_option
@path_option
@click.option(
    "--output",
    "-o",
    type=click.File("wb"),
    default="-",
    help="Where to write the plaintext (default: stdout).",
)
@click.argument("source", type=click.File("r"), default="-")
def open_cmd(
    phrase: str,
    passphrase: str,
    labels: tuple[str, ...],
    output: BinaryIO,
    source: TextIO,
) -> None:
    """Open base64 sealed data from SOURCE (default: stdin)."""
    try:
        sealed = base64.b64decode(source.read().strip(), validate=True)
    except binascii.Error as e:
        click.echo(f"Error: Input is not valid base64: {e}", err=True)
        sys.exit(1)

    key = derive_subkey(phrase, passphrase, labels)
    try:
        plaintext = SecretBoxCodec().open(key, sealed)
    except DecryptionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    output.write(plaintext)
