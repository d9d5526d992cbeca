"""Command-line interface for lofikeys.

This module provides the main CLI entry point and assembles all commands.

Commands:
- generate: Generate a new mnemonic
- check: Validate a mnemonic
- seed: Print the BIP39 seed of a mnemonic
- derive: Print a SLIP-21 subkey
- seal: Encrypt data under a subkey
- open: Decrypt sealed data
- nanoid: Print random NanoIds
- node-id: Print this device's NodeId
"""

from __future__ import annotations

import click

from lofikeys.client.cli.config import get_config_dir, setup_logging
from lofikeys.client.cli.crypto import derive, open_cmd, seal_cmd
from lofikeys.client.cli.ids import nanoid, node_id
from lofikeys.client.cli.mnemonic import check, generate, seed


@click.group()
@click.version_option(package_name="lofikeys")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """lofikeys - Mnemonic-based keys and sealing for local-first sync."""
    setup_logging(verbose)


# Mnemonic commands
cli.add_command(generate)
cli.add_command(check)
cli.add_command(seed)

# Key commands
cli.add_command(derive)
cli.add_command(seal_cmd)
cli.add_command(open_cmd)

# Identifier commands
cli.add_command(nanoid)
cli.add_command(node_id)


def main() -> None:
    """Entry point for the CLI."""
    cli()


__all__ = [
    "cli",
    "main",
    "get_config_dir",
]
