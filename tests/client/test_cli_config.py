"""Tests for CLI configuration helpers."""

import logging
from pathlib import Path

import pytest

from lofikeys.client.cli.config import get_config_dir, setup_logging


class TestConfigDir:
    """Tests for locating the config directory."""

    def test_default_is_home(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LOFIKEYS_HOME", raising=False)
        assert get_config_dir() == Path.home() / ".lofikeys"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("LOFIKEYS_HOME", str(tmp_path))
        assert get_config_dir() == tmp_path


class TestSetupLogging:
    """Tests for CLI logging configuration."""

    def test_single_handler_after_repeated_setup(self) -> None:
        logger = logging.getLogger("lofikeys")
        before = len(logger.handlers)
        setup_logging()
        setup_logging(verbose=True)
        try:
            assert len(logger.handlers) == before + 1
            assert logger.level == logging.DEBUG
        finally:
            for handler in logger.handlers[before:]:
                logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)
