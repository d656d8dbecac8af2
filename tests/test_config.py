"""Tests for config module."""

from __future__ import annotations

import json

from smsuri import config


class TestConfig:
    """Tests for loading and saving configuration."""

    def test_defaults_without_file(self):
        assert config.get_config() == config.DEFAULT_CONFIG
        assert config.get_allowed_schemes() == {"sms"}
        assert config.get_output_format() == "uri"

    def test_set_value_persists(self, config_dir):
        """Values are written to config.json and read back."""
        config.set_config_value("output_format", "json")
        saved = json.loads((config_dir / "config.json").read_text())
        assert saved == {"output_format": "json"}
        assert config.get_output_format() == "json"

    def test_file_values_override_defaults(self):
        config.set_config_value("allowed_schemes", ["SMS", "tel"])
        assert config.get_config()["output_format"] == "uri"
        assert config.get_allowed_schemes() == {"sms", "tel"}

    def test_invalid_json_ignored(self, config_dir):
        """A corrupt config file falls back to defaults."""
        config_dir.mkdir(parents=True)
        (config_dir / "config.json").write_text("{not json")
        assert config.get_config() == config.DEFAULT_CONFIG

    def test_non_object_ignored(self, config_dir):
        config_dir.mkdir(parents=True)
        (config_dir / "config.json").write_text("[1, 2]")
        assert config.get_config() == config.DEFAULT_CONFIG

    def test_unknown_output_format_ignored(self):
        config.set_config_value("output_format", "xml")
        assert config.get_output_format() == "uri"
