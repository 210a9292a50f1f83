"""XDG-compliant path management for easyfs.

Only the configuration directory is used:
- Config: ~/.config/easyfs/ (or $XDG_CONFIG_HOME/easyfs/)
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "easyfs"

CONFIG_FILENAME = "config.toml"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/easyfs/ (or XDG_CONFIG_HOME/easyfs/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the default config file path.

    Returns:
        Path to ~/.config/easyfs/config.toml.
    """
    return get_config_dir() / CONFIG_FILENAME


def ensure_config_dir() -> Path:
    """Create the configuration directory if it doesn't exist.

    Returns:
        Path to the configuration directory.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    path = get_config_dir()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create config directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create config directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path
