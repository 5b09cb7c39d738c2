"""Locating the local repository root to clean."""

import logging
import os
import re
import xml.etree.ElementTree as ET
from pathlib import Path

from m2prune.config.models import UserConfigData
from m2prune.core.errors import ConfigError
from m2prune.utils.xdg import get_maven_user_dir


logger = logging.getLogger(__name__)

_PROPERTY_RE = re.compile(r"\$\{([^}]+)\}")


def _expand_properties(value: str) -> str:
    """Expand ``${user.home}`` and ``${env.NAME}`` references."""

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name == "user.home":
            return str(Path.home())
        if name.startswith("env."):
            return os.environ.get(name[4:], match.group(0))
        return match.group(0)

    return _PROPERTY_RE.sub(replace, value)


def read_maven_local_repository(settings_path: Path) -> Path | None:
    """Read ``<localRepository>`` from a Maven settings.xml.

    Args:
        settings_path: Path to settings.xml

    Returns:
        The configured repository path, or None if the file or element is absent

    Raises:
        ConfigError: If the file exists but is not well-formed XML
    """
    if not settings_path.is_file():
        return None

    try:
        root = ET.parse(settings_path).getroot()
    except (ET.ParseError, OSError) as e:
        raise ConfigError(f"Cannot read Maven settings {settings_path}: {e}") from e

    for child in root:
        # Tags carry the settings namespace, e.g. {http://maven.apache.org/SETTINGS/1.0.0}
        if child.tag.rsplit("}", 1)[-1] == "localRepository":
            text = (child.text or "").strip()
            if text:
                logger.debug("localRepository from %s: %s", settings_path, text)
                return Path(_expand_properties(text)).expanduser()
    return None


def resolve_repository_path(
    explicit: Path | None, config: UserConfigData
) -> Path:
    """Pick the repository root, first hit wins.

    1. Path given on the command line
    2. ``repository_path`` from config file or environment
    3. ``<localRepository>`` from Maven settings.xml
    4. ``~/.m2/repository``
    """
    if explicit is not None:
        return explicit.expanduser()
    if config.repository_path is not None:
        return config.repository_path
    from_settings = read_maven_local_repository(config.maven_settings_path)
    if from_settings is not None:
        return from_settings
    return get_maven_user_dir() / "repository"


def validate_repository_path(path: Path) -> Path:
    """Ensure the repository root exists and is a directory.

    Returns:
        The resolved absolute path

    Raises:
        ConfigError: If the path is missing or not a directory
    """
    if not path.exists():
        raise ConfigError(f"Directory '{path}' does not exist.")
    if not path.is_dir():
        raise ConfigError(f"'{path}' is not a directory.")
    return path.resolve()
