"""Tests for repository root resolution."""

from pathlib import Path

import pytest

from m2prune.config.models import UserConfigData
from m2prune.config.repository import (
    read_maven_local_repository,
    resolve_repository_path,
    validate_repository_path,
)
from m2prune.core.errors import ConfigError


SETTINGS_WITH_NAMESPACE = """<?xml version="1.0" encoding="UTF-8"?>
<settings xmlns="http://maven.apache.org/SETTINGS/1.0.0"
          xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">
  <localRepository>${user.home}/custom-repo</localRepository>
  <offline>false</offline>
</settings>
"""

SETTINGS_WITHOUT_REPOSITORY = """<settings><offline>true</offline></settings>"""


class TestReadMavenLocalRepository:
    """Test read_maven_local_repository."""

    def test_missing_settings(self, tmp_path):
        assert read_maven_local_repository(tmp_path / "settings.xml") is None

    def test_namespaced_settings_with_user_home(self, isolated_environment, tmp_path):
        settings = tmp_path / "settings.xml"
        settings.write_text(SETTINGS_WITH_NAMESPACE)

        assert read_maven_local_repository(settings) == isolated_environment / "custom-repo"

    def test_env_property(self, tmp_path, monkeypatch):
        monkeypatch.setenv("REPO_BASE", str(tmp_path))
        settings = tmp_path / "settings.xml"
        settings.write_text(
            "<settings><localRepository>${env.REPO_BASE}/r</localRepository></settings>"
        )

        assert read_maven_local_repository(settings) == tmp_path / "r"

    def test_settings_without_local_repository(self, tmp_path):
        settings = tmp_path / "settings.xml"
        settings.write_text(SETTINGS_WITHOUT_REPOSITORY)

        assert read_maven_local_repository(settings) is None

    def test_malformed_settings(self, tmp_path):
        settings = tmp_path / "settings.xml"
        settings.write_text("<settings><localRepository>")

        with pytest.raises(ConfigError, match="Cannot read Maven settings"):
            read_maven_local_repository(settings)


class TestResolveRepositoryPath:
    """Precedence of repository root sources."""

    def test_explicit_path_wins(self, isolated_environment, tmp_path):
        config = UserConfigData(repository_path=tmp_path / "configured")

        assert resolve_repository_path(tmp_path / "cli", config) == tmp_path / "cli"

    def test_configured_path(self, isolated_environment, tmp_path):
        config = UserConfigData(repository_path=tmp_path / "configured")

        assert resolve_repository_path(None, config) == tmp_path / "configured"

    def test_maven_settings(self, isolated_environment):
        m2 = isolated_environment / ".m2"
        m2.mkdir()
        (m2 / "settings.xml").write_text(SETTINGS_WITH_NAMESPACE)

        resolved = resolve_repository_path(None, UserConfigData())

        assert resolved == isolated_environment / "custom-repo"

    def test_default_location(self, isolated_environment):
        resolved = resolve_repository_path(None, UserConfigData())

        assert resolved == isolated_environment / ".m2" / "repository"


class TestValidateRepositoryPath:
    """Test validate_repository_path."""

    def test_existing_directory(self, tmp_path):
        assert validate_repository_path(tmp_path) == tmp_path.resolve()

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ConfigError, match="does not exist"):
            validate_repository_path(tmp_path / "missing")

    def test_file_is_rejected(self, tmp_path):
        file_path = tmp_path / "file"
        file_path.touch()

        with pytest.raises(ConfigError, match="is not a directory"):
            validate_repository_path(file_path)


def test_empty_repository_path_env_means_unset(isolated_environment, monkeypatch):
    monkeypatch.setenv("M2PRUNE_REPOSITORY_PATH", "")

    assert UserConfigData().repository_path is None


def test_path_env_is_expanded(isolated_environment, monkeypatch):
    monkeypatch.setenv("M2PRUNE_MAVEN_SETTINGS_PATH", "~/alt/settings.xml")

    assert UserConfigData().maven_settings_path == Path(isolated_environment) / "alt/settings.xml"
