"""Pytest configuration and fixtures."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import structlog

from smsuri import config


@pytest.fixture(autouse=True)
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config file at a temporary directory.

    Keeps a real ~/.config/smsuri/config.json from leaking into tests.
    """
    config_dir = tmp_path / "config"
    monkeypatch.setattr(config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_FILE", config_dir / "config.json")
    return config_dir


@pytest.fixture
def restore_root_logger():
    """Remove the handlers configure_logging installs on the root logger."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
