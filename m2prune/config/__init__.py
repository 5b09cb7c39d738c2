"""Configuration loading and repository root resolution."""

from .models import UserConfigData
from .repository import (
    read_maven_local_repository,
    resolve_repository_path,
    validate_repository_path,
)
from .user_config import UserConfig, create_user_config


__all__ = [
    "UserConfig",
    "UserConfigData",
    "create_user_config",
    "read_maven_local_repository",
    "resolve_repository_path",
    "validate_repository_path",
]
