"""Configuration utilities for the lofikeys CLI.

This module locates the config directory and sets up CLI logging.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

CONFIG_DIR_ENV = "LOFIKEYS_HOME"
MNEMONIC_ENV = "LOFIKEYS_MNEMONIC"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class _CliHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler installed by setup_logging (replaced on each call)."""


def get_config_dir() -> Path:
    """Get the configuration directory for lofikeys.

    Returns:
        Path from $LOFIKEYS_HOME, or ~/.lofikeys.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".lofikeys"


def setup_logging(verbose: bool = False) -> None:
    """Configure the lofikeys logger to write to stderr.

    stdout is reserved for command output (keys, ciphertext), so log records
    go to stderr only.
    """
    root_logger = logging.getLogger("lofikeys")
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in list(root_logger.handlers):
        if isinstance(handler, _CliHandler):
            root_logger.removeHandler(handler)

    handler = _CliHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
