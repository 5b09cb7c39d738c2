"""Core test fixtures for the m2prune project."""

import logging
import os
from collections.abc import Callable, Generator
from pathlib import Path
from unittest.mock import Mock

import pytest
import structlog
from typer.testing import CliRunner

from m2prune.adapters.file_adapter import FileAdapter


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_file_adapter() -> Mock:
    """Create a mock file adapter for testing."""
    return Mock(spec=FileAdapter)


# ---- Test Isolation Fixtures ----


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo setup_logging() done by CLI invocations.

    The console handler would otherwise keep pointing at the runner's closed stream.
    """
    yield
    for handler in logging.getLogger().handlers:
        handler.close()
    logging.getLogger().handlers = []
    logging.getLogger().setLevel(logging.WARNING)
    structlog.reset_defaults()


@pytest.fixture
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Isolate HOME, XDG config, working directory and M2PRUNE_ variables.

    Yields:
        The fake home directory
    """
    home = tmp_path / "home"
    home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()

    for key in list(os.environ):
        if key.startswith("M2PRUNE_"):
            monkeypatch.delenv(key)

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.chdir(workdir)

    yield home


# ---- Repository Builders ----


SnapshotBuilder = Callable[..., Path]


@pytest.fixture
def make_snapshot_dir(tmp_path: Path) -> SnapshotBuilder:
    """Factory creating ``<repo>/<group>/<artifact>/<version>`` with files.

    Usage:
        version_dir = make_snapshot_dir(
            "com/x", "my-artifact", "1.0-SNAPSHOT",
            {"my-artifact-1.0-20230101.120000-1.jar": b"abc"},
        )
    """
    repo = tmp_path / "repository"

    def _make(
        group_path: str,
        artifact_id: str,
        version: str,
        files: dict[str, bytes] | list[str],
    ) -> Path:
        version_dir = repo / group_path / artifact_id / version
        version_dir.mkdir(parents=True, exist_ok=True)
        items = files.items() if isinstance(files, dict) else ((n, b"x") for n in files)
        for name, content in items:
            (version_dir / name).write_bytes(content)
        return version_dir

    return _make


@pytest.fixture
def repository_root(tmp_path: Path) -> Path:
    """Root directory used by make_snapshot_dir."""
    root = tmp_path / "repository"
    root.mkdir(exist_ok=True)
    return root


@pytest.fixture
def scenario_repository(
    make_snapshot_dir: SnapshotBuilder, repository_root: Path
) -> Path:
    """Repository holding two builds of com/x/my-artifact/1.0-SNAPSHOT plus metadata."""
    make_snapshot_dir(
        "com/x",
        "my-artifact",
        "1.0-SNAPSHOT",
        {
            "my-artifact-1.0-20230101.120000-1.jar": b"a" * 100,
            "my-artifact-1.0-20230101.120000-1.pom": b"b" * 20,
            "my-artifact-1.0-20230105.093000-2.jar": b"c" * 110,
            "my-artifact-1.0-20230105.093000-2.pom": b"d" * 21,
            "my-artifact-1.0-maven-metadata.xml": b"<metadata/>",
        },
    )
    return repository_root
