"""Retention engine: walks a local repository and prunes superseded snapshot builds."""

from collections.abc import Callable
from enum import IntEnum
from pathlib import Path

from m2prune.adapters.file_adapter import FileAdapter, create_file_adapter
from m2prune.core.errors import FileSystemError, ParseError
from m2prune.core.structlog_logger import StructlogMixin
from m2prune.retention.grammar import (
    match_timestamped_build,
    match_version_dir,
    snapshot_file_prefix,
)
from m2prune.retention.statistics import RetentionStatistics
from m2prune.retention.version_token import VersionToken


Reporter = Callable[[str], None]


class ProcessStatus(IntEnum):
    """Worst anomaly observed in a subtree. Higher values win."""

    OK = 0
    PARSE_SKIPPED = 1
    LISTING_FAILED = 2
    DELETE_FAILED = 3


class RetentionEngine(StructlogMixin):
    """Deletes every timestamped snapshot build except the latest one.

    Directories are classified by name only. Version directories ending in
    ``-SNAPSHOT`` are cleaned, other version directories are left alone and
    everything else is treated as a group or artifact segment and descended
    into. Per-file and per-directory problems are logged, counted and folded
    into the returned status; nothing is raised out of ``process_directory``.
    """

    def __init__(
        self,
        file_adapter: FileAdapter,
        statistics: RetentionStatistics | None = None,
        verbose: bool = False,
        reporter: Reporter | None = None,
        dry_run: bool = False,
    ) -> None:
        """Initialize the engine.

        Args:
            file_adapter: Directory listing and deletion capability
            statistics: Counter accumulator, a fresh one when omitted
            verbose: Report every kept, deleted and skipped file
            reporter: Output channel for verbose lines, the logger when omitted
            dry_run: Decide and count without removing anything
        """
        super().__init__()
        self.file_adapter = file_adapter
        self.statistics = statistics if statistics is not None else RetentionStatistics()
        self.verbose = verbose
        self.reporter = reporter
        self.dry_run = dry_run

    @property
    def deleted_files(self) -> int:
        return self.statistics.deleted_files

    @property
    def reclaimed_bytes(self) -> int:
        return self.statistics.reclaimed_bytes

    @property
    def failed_deletes(self) -> int:
        return self.statistics.failed_deletes

    def process_directory(self, root: Path) -> ProcessStatus:
        """Clean every snapshot version directory below ``root``.

        Args:
            root: Directory to start from; itself never classified

        Returns:
            Worst status seen anywhere in the subtree
        """
        status = ProcessStatus.OK
        stack = [root]

        while stack:
            directory = stack.pop()
            entries = self._list(directory)
            if entries is None:
                status = max(status, ProcessStatus.LISTING_FAILED)
                continue

            descend: list[Path] = []
            for subdir in entries:
                try:
                    if not self.file_adapter.is_dir(subdir):
                        continue
                except OSError as e:
                    self._listing_failed(subdir, e)
                    status = max(status, ProcessStatus.LISTING_FAILED)
                    continue

                version = match_version_dir(subdir.name)
                if version is None:
                    descend.append(subdir)
                elif version.is_snapshot:
                    status = max(status, self.clean_snapshot_dir(subdir))
                else:
                    self.logger.debug("release_version_skipped", path=str(subdir))

            # Reversed so siblings are visited in listing order
            stack.extend(reversed(descend))

        return status

    def clean_snapshot_dir(self, snapshot_dir: Path) -> ProcessStatus:
        """Delete all timestamped builds in ``snapshot_dir`` except the latest.

        Files whose names do not follow ``<artifactId>-<baseVersion>-<yyyyMMdd.HHmmss>-<n><rest>``
        are never touched. All files belonging to the latest build survive together.
        """
        status = ProcessStatus.OK
        prefix = snapshot_file_prefix(snapshot_dir.parent.name, snapshot_dir.name)

        entries = self._list(snapshot_dir)
        if entries is None:
            return ProcessStatus.LISTING_FAILED

        tokens: dict[Path, VersionToken] = {}
        for entry in entries:
            if not entry.name.startswith(prefix):
                continue
            build = match_timestamped_build(entry.name[len(prefix) :])
            if build is None:
                continue
            try:
                if not self.file_adapter.is_file(entry):
                    continue
            except OSError as e:
                self._listing_failed(entry, e)
                status = max(status, ProcessStatus.LISTING_FAILED)
                continue

            try:
                tokens[entry] = VersionToken.parse(build.date, build.time, build.build)
            except ParseError as e:
                self.logger.warning(
                    "snapshot_name_unparsable", path=str(entry), error=str(e)
                )
                self.statistics.record_skip()
                self._report(f"Skipping '{entry}': {e}")
                status = max(status, ProcessStatus.PARSE_SKIPPED)

        if not tokens:
            return status

        survivor = max(tokens.values())
        self.logger.debug("survivor_selected", path=str(snapshot_dir), version=str(survivor))

        for path, token in tokens.items():
            if token == survivor:
                self._report(f"Keeping '{path}'")
                continue
            status = max(status, self._delete(path))

        return status

    def _delete(self, path: Path) -> ProcessStatus:
        try:
            size = self.file_adapter.file_size(path)
            if not self.dry_run:
                self.file_adapter.remove_file(path)
        except (FileSystemError, OSError) as e:
            self.statistics.record_failed_delete()
            self.logger.error("delete_failed", path=str(path), error=str(e))
            self._report(f"Failed to delete file '{path}'")
            return ProcessStatus.DELETE_FAILED

        self.statistics.record_deletion(size)
        verb = "Would delete" if self.dry_run else "Deleted"
        self._report(f"{verb} '{path}' ({size} bytes)")
        return ProcessStatus.OK

    def _list(self, directory: Path) -> list[Path] | None:
        try:
            return self.file_adapter.list_directory(directory)
        except (FileSystemError, OSError) as e:
            self._listing_failed(directory, e)
            return None

    def _listing_failed(self, directory: Path, error: Exception) -> None:
        self.statistics.record_listing_failure()
        self.logger.warning("listing_failed", path=str(directory), error=str(error))

    def _report(self, message: str) -> None:
        if not self.verbose:
            return
        if self.reporter is not None:
            self.reporter(message)
        else:
            self.logger.info(message)


def create_retention_engine(
    file_adapter: FileAdapter | None = None,
    verbose: bool = False,
    reporter: Reporter | None = None,
    dry_run: bool = False,
) -> RetentionEngine:
    """Create a retention engine with a fresh statistics accumulator.

    Args:
        file_adapter: File adapter, the real file system when omitted
        verbose: Report every file decision
        reporter: Output channel for verbose lines
        dry_run: Decide and count without removing anything

    Returns:
        Configured RetentionEngine
    """
    return RetentionEngine(
        file_adapter=file_adapter or create_file_adapter(),
        statistics=RetentionStatistics(),
        verbose=verbose,
        reporter=reporter,
        dry_run=dry_run,
    )
