"""easyfs configuration and settings.

Configuration is stored in ~/.config/easyfs/config.toml and controls
defaults for streaming I/O, searches and directory creation.
"""

import codecs
import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from easyfs.core.paths import get_config_path
from easyfs.errors import ConfigError, ConfigNotFoundError, ConfigParseError

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 4096
MAX_CHUNK_SIZE = 64 * 1024 * 1024


class FSConfig(BaseModel):
    """Configuration for easyfs operations.

    Attributes:
        chunk_size: Default chunk size in bytes for streaming reads and copies.
        search_quantity: Default result limit for CLI searches.
        encoding: Text encoding used by string reads and writes.
        dir_mode: Permission bits for directories created by easyfs.
        follow_symlinks: Whether tree walks descend into symlinked directories.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    chunk_size: Annotated[
        int,
        Field(ge=1, le=MAX_CHUNK_SIZE, description="Streaming chunk size in bytes"),
    ] = DEFAULT_CHUNK_SIZE
    search_quantity: Annotated[
        int,
        Field(ge=0, description="Default maximum number of search results"),
    ] = 100
    encoding: Annotated[str, Field(description="Text encoding")] = "utf-8"
    dir_mode: Annotated[
        int,
        Field(ge=0, le=0o7777, description="Mode for created directories"),
    ] = 0o777
    follow_symlinks: Annotated[
        bool,
        Field(description="Descend into symlinked directories while walking"),
    ] = False

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate that the encoding is known to the codecs registry."""
        try:
            codecs.lookup(v)
        except LookupError:
            msg = f"unknown encoding '{v}'"
            raise ValueError(msg) from None
        return v


def load_config(path: Path | None = None) -> FSConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated FSConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return FSConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def save_config(config: FSConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written to a temporary file in the same directory and
    moved into place with os.replace().

    Args:
        config: The FSConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    logger.debug("Saved config to %s", config_path)
    return config_path


def config_to_dict(config: FSConfig) -> dict[str, object]:
    """Convert FSConfig to a dictionary for TOML serialization.

    Args:
        config: The FSConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    return config.model_dump()


_active_config: FSConfig | None = None


def get_config() -> FSConfig:
    """Return the process-wide configuration.

    Loads the user config file on first use and falls back to defaults
    when it is missing. A broken config file is reported and ignored.

    Returns:
        The active FSConfig.
    """
    global _active_config
    if _active_config is None:
        try:
            _active_config = load_config()
        except ConfigNotFoundError:
            logger.debug("No config file found, using defaults")
            _active_config = FSConfig()
        except ConfigError as e:
            logger.warning("Ignoring invalid config: %s", e)
            _active_config = FSConfig()
    return _active_config


def set_config(config: FSConfig | None) -> None:
    """Replace the process-wide configuration.

    Passing None forces the next get_config() call to reload from disk.
    """
    global _active_config
    _active_config = config
