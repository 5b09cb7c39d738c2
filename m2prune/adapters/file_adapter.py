"""File adapter for abstracting file system operations."""

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from m2prune.core.errors import FileSystemError, create_file_error


logger = logging.getLogger(__name__)


@runtime_checkable
class FileAdapter(Protocol):
    """Protocol for the file system operations the retention engine needs."""

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        ...

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        ...

    def list_directory(self, path: Path) -> list[Path]:
        """List all items in a directory.

        Args:
            path: Directory path to list

        Returns:
            List of all paths in the directory

        Raises:
            ListingError: If directory cannot be accessed
        """
        ...

    def file_size(self, path: Path) -> int:
        """Return the size of a file in bytes.

        Raises:
            FileSystemError: If the file cannot be inspected
        """
        ...

    def remove_file(self, path: Path) -> None:
        """Remove a file.

        Args:
            path: Path to the file to remove

        Raises:
            DeletionError: If the file cannot be removed, including when it vanished
        """
        ...


class FileSystemAdapter:
    """File system adapter implementation."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def list_directory(self, path: Path) -> list[Path]:
        """List all items in a directory."""
        try:
            logger.debug("Listing directory contents: %s", path)
            if not self.is_dir(path):
                error = create_file_error(
                    path, "list_directory", ValueError("Not a directory"), {}
                )
                logger.error("Path is not a directory: %s", path)
                raise error

            items = sorted(path.iterdir())
            logger.debug("Found %d items in %s", len(items), path)
            return items
        except FileSystemError:
            raise
        except PermissionError as e:
            error = create_file_error(path, "list_directory", e, {})
            logger.error("Permission denied listing directory: %s", path)
            raise error from e
        except OSError as e:
            error = create_file_error(path, "list_directory", e, {})
            logger.error("Error listing directory %s: %s", path, e)
            raise error from e

    def file_size(self, path: Path) -> int:
        """Return the size of a file in bytes."""
        try:
            return path.stat().st_size
        except OSError as e:
            error = create_file_error(path, "file_size", e, {})
            logger.error("Error reading size of %s: %s", path, e)
            raise error from e

    def remove_file(self, path: Path) -> None:
        """Remove a file. A file that is already gone counts as a failure."""
        try:
            logger.debug("Removing file: %s", path)
            path.unlink()
            logger.debug("Successfully removed file: %s", path)
        except PermissionError as e:
            error = create_file_error(path, "remove_file", e, {})
            logger.error("Permission denied removing file: %s", path)
            raise error from e
        except OSError as e:
            # FileNotFoundError, IsADirectoryError and friends
            error = create_file_error(path, "remove_file", e, {})
            logger.error("Error removing file %s: %s", path, e)
            raise error from e


def create_file_adapter() -> FileAdapter:
    """Create a file adapter with default implementation."""
    return FileSystemAdapter()
