"""XDG Base Directory specification helpers."""

import os
from pathlib import Path


def get_xdg_config_dir() -> Path:
    """Get XDG config directory for m2prune.

    Returns:
        Path to config directory: $XDG_CONFIG_HOME/m2prune or ~/.config/m2prune
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "m2prune"
    return Path.home() / ".config" / "m2prune"


def get_maven_user_dir() -> Path:
    """Get the per-user Maven directory, ``~/.m2``."""
    return Path.home() / ".m2"
