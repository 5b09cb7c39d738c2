"""
User configuration management for m2prune.

This module handles user-specific configuration settings with multiple sources:
1. Environment variables (highest precedence)
2. Command-line provided config file
3. Config file in current directory
4. User's XDG config directory
5. Default values (lowest precedence)
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from m2prune.config.models import UserConfigData
from m2prune.core.errors import ConfigError
from m2prune.utils.xdg import get_xdg_config_dir


logger = logging.getLogger(__name__)


class UserConfig:
    """Loads and exposes the user configuration."""

    def __init__(self, cli_config_path: str | Path | None = None):
        """
        Initialize the user configuration handler.

        Args:
            cli_config_path: Optional config file path provided via CLI

        Raises:
            ConfigError: If the CLI config file is missing, or any found file is invalid
        """
        self._cli_config_path = (
            Path(cli_config_path).expanduser().resolve() if cli_config_path else None
        )
        self._config_paths = self._generate_config_paths()
        self.config_file: Path | None = None
        self._load_config()

    @property
    def data(self) -> UserConfigData:
        return self._config

    def _generate_config_paths(self) -> list[Path]:
        """Generate a list of config paths to search in order of precedence."""
        config_paths = []

        if self._cli_config_path:
            config_paths.append(self._cli_config_path)

        config_paths.extend([Path.cwd() / "m2prune.yaml", Path.cwd() / ".m2prune.yml"])

        xdg_dir = get_xdg_config_dir()
        config_paths.extend([xdg_dir / "config.yaml", xdg_dir / "config.yml"])

        return config_paths

    def _load_config(self) -> None:
        if self._cli_config_path and not self._cli_config_path.is_file():
            raise ConfigError(f"Configuration file not found: {self._cli_config_path}")

        logger.debug("Config search paths: %s", [str(p) for p in self._config_paths])

        config_data: dict[str, Any] = {}
        for path in self._config_paths:
            if path.is_file():
                config_data = self._read_yaml(path)
                self.config_file = path
                logger.debug("Loaded user configuration from %s", path)
                break
        else:
            logger.debug("No user configuration files found, using defaults")

        try:
            self._config = UserConfigData(**config_data)
        except ValidationError as e:
            source = self.config_file or "environment"
            raise ConfigError(f"Invalid configuration in {source}: {e}") from e

    @staticmethod
    def _read_yaml(path: Path) -> dict[str, Any]:
        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file {path} must contain a mapping")
        return data

    def get_log_level_int(self) -> int:
        return self._config.get_log_level_int()


def create_user_config(cli_config_path: str | Path | None = None) -> UserConfig:
    """Create a UserConfig instance.

    Args:
        cli_config_path: Optional config file path provided via CLI

    Returns:
        Loaded UserConfig
    """
    return UserConfig(cli_config_path=cli_config_path)
