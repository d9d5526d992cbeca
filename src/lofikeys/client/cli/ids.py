"""Identifier commands for the lofikeys CLI.

Commands:
- nanoid: Print random NanoIds
- node-id: Print this device's persisted NodeId
"""

from __future__ import annotations

import sys

import click

from lofikeys.client.cli.config import get_config_dir
from lofikeys.client.device import load_or_create_node_id, reset_device
from lofikeys.core.errors import DeviceIdentityError
from lofikeys.core.identifiers import IdentifierGenerator


@click.command()
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of NanoIds to print.",
)
def nanoid(count: int) -> None:
    """Print random 21-character NanoIds, one per line."""
    generator = IdentifierGenerator()
    for _ in range(count):
        click.echo(generator.nanoid())


@click.command("node-id")
@click.option(
    "--reset",
    is_flag=True,
    help="Discard the stored NodeId and create a new one.",
)
def node_id(reset: bool) -> None:
    """Print this device's NodeId, creating it on first use.

    WARNING: --reset gives this device a new identity. Other replicas will
    see it as a different device.
    """
    config_dir = get_config_dir()

    if reset and reset_device(config_dir):
        click.echo("Previous device identity removed.", err=True)

    try:
        click.echo(load_or_create_node_id(config_dir))
    except DeviceIdentityError as e:
        click.echo(f"Error: {e}", err=True)
        click.echo("Run 'lofikeys node-id --reset' to create a new identity.", err=True)
        sys.exit(1)
