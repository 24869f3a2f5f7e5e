"""Configuration models for dsconv.

The optional user configuration file is ``config.toml`` in the platform's
application directory: ``$XDG_CONFIG_HOME/dsconv`` (default
``~/.config/dsconv``) on Linux, ``~/Library/Application Support/dsconv`` on
macOS and the roaming AppData folder on Windows:

    # Pretty-print by default; -p/--pretty on the command line still wins
    pretty = true
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer

from dsconv.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

APP_NAME = "dsconv"
CONFIG_FILENAME = "config.toml"


@dataclass
class Config:
    """User configuration.

    Attributes:
        pretty: Default for -p/--pretty when the flag is not given; None
            when the file does not set it.
    """

    pretty: bool | None = None

    @staticmethod
    def config_dir() -> Path:
        """Directory searched for the configuration file."""
        return Path(typer.get_app_dir(APP_NAME))

    @classmethod
    def path(cls) -> Path | None:
        """Return the configuration file path if it exists."""
        candidate = cls.config_dir() / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        return None

    @classmethod
    def from_toml(cls, path: Path | str) -> Config:
        """Load configuration from a TOML file.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        path = Path(path)
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except OSError as e:
            raise ConfigError(path, e.strerror or str(e)) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(path, str(e)) from e

        return cls.from_dict(data, path)

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: Path | str = "<config>") -> Config:
        """Create config from a dictionary. Unknown keys are ignored.

        Raises:
            ConfigError: If a recognized key has the wrong type.
        """
        config = cls()

        pretty = data.get("pretty")
        if pretty is not None and not isinstance(pretty, bool):
            raise ConfigError(path, f"'pretty' must be a boolean, got {pretty!r}")
        config.pretty = pretty

        return config

    @classmethod
    def load(cls) -> Config:
        """Load the user configuration, or defaults when there is no file."""
        path = cls.path()
        if path is None:
            return cls()
        logger.debug("Loading config from %s", path)
        return cls.from_toml(path)

    def resolve_pretty(self, flag: bool | None) -> bool:
        """Combine the command-line flag with the configured default."""
        if flag is not None:
            return flag
        return bool(self.pretty)
