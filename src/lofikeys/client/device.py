"""Device identity record.

Each device gets one NodeId the first time it runs. The NodeId is stored in
device.json inside the config directory and reused from then on, because
other replicas address this device by it.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from lofikeys.core.errors import DeviceIdentityError
from lofikeys.core.identifiers import IdentifierGenerator, NodeId

logger = logging.getLogger(__name__)

DEVICE_FILE_NAME = "device.json"


def get_device_file(config_dir: Path) -> Path:
    """Get the path of the device record inside config_dir."""
    return Path(config_dir) / DEVICE_FILE_NAME


def load_node_id(config_dir: Path) -> NodeId | None:
    """Load the persisted NodeId.

    Args:
        config_dir: Directory containing device.json.

    Returns:
        The NodeId, or None if this device has no record yet.

    Raises:
        DeviceIdentityError: If the record exists but is unreadable.
    """
    device_file = get_device_file(config_dir)
    if not device_file.exists():
        return None

    try:
        data = json.loads(device_file.read_text())
    except json.JSONDecodeError as e:
        raise DeviceIdentityError(f"Corrupted device record: {e}") from e

    try:
        return NodeId(data["node_id"])
    except (KeyError, TypeError, ValueError) as e:
        raise DeviceIdentityError(f"Invalid device record format: {e}") from e


def load_or_create_node_id(
    config_dir: Path,
    generator: IdentifierGenerator | None = None,
) -> NodeId:
    """Get this device's NodeId, creating and persisting it on first run.

    Args:
        config_dir: Directory holding device.json (created if missing).
        generator: Identifier generator to use for a new NodeId.

    Returns:
        The device's NodeId.

    Raises:
        DeviceIdentityError: If an existing record is corrupted.
    """
    existing = load_node_id(config_dir)
    if existing is not None:
        return existing

    node_id = (generator or IdentifierGenerator()).node_id()
    config_dir = Path(config_dir)
    config_dir.mkdir(parents=True, exist_ok=True)
    data = {
        "node_id": str(node_id),
        "created_at": datetime.now(UTC).isoformat(),
    }
    try:
        with open(get_device_file(config_dir), "x") as f:
            f.write(json.dumps(data, indent=2))
    except FileExistsError:
        # Another process created the record first; its NodeId wins
        logger.info("Device identity created concurrently, using the stored one")
        stored = load_node_id(config_dir)
        if stored is None:
            raise DeviceIdentityError("Device record disappeared while it was being created")
        return stored

    logger.info("Created device identity %s", node_id)
    return node_id


def reset_device(config_dir: Path) -> bool:
    """Delete the device record.

    Returns:
        True if a record was removed.
    """
    device_file = get_device_file(config_dir)
    if not device_file.exists():
        return False
    device_file.unlink()
    logger.info("Removed device identity record %s", device_file)
    return True
