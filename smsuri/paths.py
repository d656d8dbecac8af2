"""XDG-compliant storage paths for smsuri.

Directory layout follows XDG Base Directory Specification:
- ~/.config/smsuri/       Config (persistent)
- ~/.local/share/smsuri/  Log output (persistent)

See: https://specifications.freedesktop.org/basedir-spec/latest/
"""

from pathlib import Path

# Base directories
CONFIG_DIR = Path.home() / ".config" / "smsuri"
DATA_DIR = Path.home() / ".local" / "share" / "smsuri"

CONFIG_FILE = CONFIG_DIR / "config.json"
LOG_FILE = DATA_DIR / "smsuri.log"
