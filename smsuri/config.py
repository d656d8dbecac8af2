"""Configuration for smsuri.

Settings control which URI schemes the registry hands out and how the CLI
prints results. Missing keys fall back to DEFAULT_CONFIG.

Use `smsuri config set <key> <value>` to configure, or edit
~/.config/smsuri/config.json directly.
"""

from __future__ import annotations

import json

from .paths import CONFIG_DIR, CONFIG_FILE

# Default configuration values
DEFAULT_CONFIG = {
    "allowed_schemes": ["sms"],
    "output_format": "uri",
}

OUTPUT_FORMATS = ("uri", "json")


def _load_config() -> dict:
    """Load configuration from config file."""
    if not CONFIG_FILE.exists():
        return {}
    try:
        config = json.loads(CONFIG_FILE.read_text())
    except (json.JSONDecodeError, OSError):
        return {}
    return config if isinstance(config, dict) else {}


def get_config() -> dict:
    """Get the full configuration with defaults applied.

    Returns a dict with all config keys, using file values where present
    and defaults otherwise.
    """
    config = _load_config()
    return {**DEFAULT_CONFIG, **config}


def get_allowed_schemes() -> set[str]:
    """Return the lowercased scheme names the registry may hand out."""
    schemes = get_config().get("allowed_schemes") or []
    if isinstance(schemes, str):
        schemes = [schemes]
    return {str(s).lower() for s in schemes}


def get_output_format() -> str:
    """Return the default CLI output format ("uri" or "json")."""
    value = get_config().get("output_format")
    return value if value in OUTPUT_FORMATS else DEFAULT_CONFIG["output_format"]


def set_config_value(key: str, value: str | list[str]) -> None:
    """Set a configuration value and persist to file.

    Args:
        key: Configuration key (e.g., "allowed_schemes", "output_format")
        value: Value to set
    """
    # Load existing config
    config = _load_config()

    config[key] = value

    # Ensure config directory exists
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    CONFIG_FILE.write_text(json.dumps(config, indent=2) + "\n")
