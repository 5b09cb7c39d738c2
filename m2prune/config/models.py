"""User configuration models."""

import logging
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from m2prune.utils.xdg import get_maven_user_dir


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class UserConfigData(BaseSettings):
    """User configuration data model with automatic environment variable support.

    Precedence order (highest to lowest):
    1. Environment variables (``M2PRUNE_*``)
    2. Constructor arguments (file data)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="M2PRUNE_",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override configuration file values."""
        return (env_settings, init_settings)

    repository_path: Path | None = Field(
        default=None,
        description="Local repository root; resolved from Maven settings when unset",
    )
    maven_settings_path: Path = Field(
        default_factory=lambda: get_maven_user_dir() / "settings.xml",
        description="Maven settings.xml consulted for <localRepository>",
    )
    log_level: str = Field(default="WARNING", description="Default log level")
    verbose: bool = Field(default=False, description="Report every file decision")
    dry_run: bool = Field(default=False, description="Never remove anything")

    @field_validator("repository_path", "maven_settings_path", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Any:
        if isinstance(v, str) and v.strip():
            return Path(v.strip()).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        if isinstance(v, str):
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper_v = v.strip().upper()
        if upper_v not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}")
        return upper_v

    def get_log_level_int(self) -> int:
        """Get log level as integer for logging module."""
        return getattr(logging, self.log_level, logging.WARNING)  # type: ignore[no-any-return]
