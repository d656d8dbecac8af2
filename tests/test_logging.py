"""Tests for logging module."""

from __future__ import annotations

import json
import logging

import structlog

from smsuri import logging as smsuri_logging
from smsuri.logging import SmsUriError, configure_logging, get_logger


def _own_handler_levels(root: logging.Logger) -> list[int]:
    return [
        h.level
        for h in root.handlers
        if isinstance(h.formatter, structlog.stdlib.ProcessorFormatter)
    ]


def test_error_is_exception():
    assert issubclass(SmsUriError, Exception)
    assert str(SmsUriError("bad")) == "bad"


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_json_log_file(self, tmp_path, restore_root_logger):
        """Events and their fields are written as JSON lines."""
        log_file = tmp_path / "out" / "log.jsonl"
        configure_logging(json_log=str(log_file))
        get_logger("smsuri.test").info("Something happened", count=3)

        event = json.loads(log_file.read_text().splitlines()[-1])
        assert event["event"] == "Something happened"
        assert event["count"] == 3
        assert event["level"] == "info"
        assert event["logger"] == "smsuri.test"

    def test_auto_uses_default_file(self, tmp_path, monkeypatch, restore_root_logger):
        log_file = tmp_path / "data" / "smsuri.log"
        monkeypatch.setattr(smsuri_logging, "LOG_FILE", log_file)
        configure_logging(json_log="auto")
        get_logger("smsuri.test").debug("Debug event")
        assert "Debug event" in log_file.read_text()

    def test_console_level(self, restore_root_logger):
        """stderr gets WARNING by default and DEBUG when verbose."""
        configure_logging()
        levels = _own_handler_levels(restore_root_logger)
        assert logging.WARNING in levels

        configure_logging(verbose=True)
        levels = _own_handler_levels(restore_root_logger)
        assert logging.DEBUG in levels

    def test_reconfigure_replaces_handlers(self, tmp_path, restore_root_logger):
        """Calling configure_logging twice does not duplicate output."""
        configure_logging(json_log=str(tmp_path / "a.jsonl"))
        configure_logging(json_log=str(tmp_path / "a.jsonl"))
        get_logger("smsuri.test").warning("Once")
        lines = (tmp_path / "a.jsonl").read_text().splitlines()
        assert len(lines) == 1

    def test_foreign_handlers_kept(self, restore_root_logger):
        """Handlers installed by the host application survive."""
        foreign = logging.NullHandler()
        restore_root_logger.addHandler(foreign)
        try:
            configure_logging()
            assert foreign in restore_root_logger.handlers
        finally:
            restore_root_logger.removeHandler(foreign)

    def test_previous_json_file_closed(self, tmp_path, restore_root_logger):
        """Reconfiguring closes the JSON log file from the earlier call."""
        configure_logging(json_log=str(tmp_path / "first.jsonl"))
        (first,) = [
            h
            for h in restore_root_logger.handlers
            if isinstance(h, logging.FileHandler)
            and isinstance(h.formatter, structlog.stdlib.ProcessorFormatter)
        ]
        configure_logging(json_log=str(tmp_path / "second.jsonl"))
        assert first not in restore_root_logger.handlers
        assert first.stream is None
