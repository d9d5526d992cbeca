"""Tests for device module - Persisted device identity."""

import json
import re
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from lofikeys.client.device import (
    load_node_id,
    load_or_create_node_id,
    reset_device,
)
from lofikeys.core import DeviceIdentityError, IdentifierGenerator, NodeId


class TestLoadOrCreate:
    """Tests for first-run creation and reuse."""

    def test_creates_record_on_first_run(self, tmp_path: Path) -> None:
        node_id = load_or_create_node_id(tmp_path)
        assert re.fullmatch(r"[0-9a-f]{16}", node_id)
        data = json.loads((tmp_path / "device.json").read_text())
        assert data["node_id"] == node_id
        assert "created_at" in data

    def test_reuses_existing_record(self, tmp_path: Path) -> None:
        first = load_or_create_node_id(tmp_path)
        second = load_or_create_node_id(tmp_path)
        assert first == second

    def test_generates_only_once(self, tmp_path: Path) -> None:
        generator = MagicMock(spec=IdentifierGenerator)
        generator.node_id.return_value = NodeId("00112233445566ff")
        load_or_create_node_id(tmp_path, generator)
        load_or_create_node_id(tmp_path, generator)
        generator.node_id.assert_called_once()

    def test_concurrent_first_run_keeps_stored_record(self, tmp_path: Path) -> None:
        """If another process writes the record first, its NodeId is returned."""
        winner = NodeId("aaaaaaaaaaaaaaaa")

        def write_competing_record() -> NodeId:
            (tmp_path / "device.json").write_text(json.dumps({"node_id": winner}))
            return NodeId("bbbbbbbbbbbbbbbb")

        generator = MagicMock(spec=IdentifierGenerator)
        generator.node_id.side_effect = write_competing_record

        assert load_or_create_node_id(tmp_path, generator) == winner
        assert load_node_id(tmp_path) == winner

    def test_creates_config_dir(self, tmp_path: Path) -> None:
        config_dir = tmp_path / "nested" / "config"
        load_or_create_node_id(config_dir)
        assert (config_dir / "device.json").exists()

    def test_returns_node_id_type(self, tmp_path: Path) -> None:
        load_or_create_node_id(tmp_path)
        assert isinstance(load_or_create_node_id(tmp_path), NodeId)


class TestLoad:
    """Tests for reading the device record."""

    def test_missing_record_returns_none(self, tmp_path: Path) -> None:
        assert load_node_id(tmp_path) is None

    def test_corrupted_record_fails(self, tmp_path: Path) -> None:
        (tmp_path / "device.json").write_text("not valid json")
        with pytest.raises(DeviceIdentityError, match="Corrupted"):
            load_node_id(tmp_path)

    def test_missing_field_fails(self, tmp_path: Path) -> None:
        (tmp_path / "device.json").write_text(json.dumps({"created_at": "now"}))
        with pytest.raises(DeviceIdentityError, match="Invalid device record"):
            load_node_id(tmp_path)

    def test_malformed_node_id_fails(self, tmp_path: Path) -> None:
        (tmp_path / "device.json").write_text(json.dumps({"node_id": "NOT-HEX"}))
        with pytest.raises(DeviceIdentityError):
            load_or_create_node_id(tmp_path)


class TestReset:
    """Tests for removing the device record."""

    def test_reset_removes_record(self, tmp_path: Path) -> None:
        first = load_or_create_node_id(tmp_path)
        assert reset_device(tmp_path) is True
        assert not (tmp_path / "device.json").exists()
        assert load_or_create_node_id(tmp_path) != first

    def test_reset_without_record(self, tmp_path: Path) -> None:
        assert reset_device(tmp_path) is False
