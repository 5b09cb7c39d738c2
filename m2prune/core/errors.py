"""Exception hierarchy for m2prune."""

from pathlib import Path
from typing import Any


class M2PruneError(Exception):
    """Base class for all m2prune errors."""


class ConfigError(M2PruneError):
    """Invalid configuration or repository root.

    Fatal to a whole run; raised before any traversal begins.
    """


class ParseError(M2PruneError):
    """A timestamped build name could not be parsed into a version token."""


class FileSystemError(M2PruneError):
    """A file system operation failed.

    Carries the path, the operation name and any extra details so callers can
    report the failure without re-deriving context.
    """

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.operation = operation
        self.details = details or {}


class ListingError(FileSystemError):
    """A directory could not be listed."""


class DeletionError(FileSystemError):
    """A file could not be removed."""


_OPERATION_ERRORS: dict[str, type[FileSystemError]] = {
    "list_directory": ListingError,
    "remove_file": DeletionError,
}


def create_file_error(
    path: Path,
    operation: str,
    error: Exception,
    details: dict[str, Any] | None = None,
) -> FileSystemError:
    """Create a FileSystemError subclass for a failed file operation.

    Args:
        path: Path the operation was performed on
        operation: Name of the failed operation
        error: Underlying exception
        details: Additional context

    Returns:
        ListingError, DeletionError or plain FileSystemError depending on operation
    """
    error_cls = _OPERATION_ERRORS.get(operation, FileSystemError)
    message = f"File operation '{operation}' failed on '{path}': {error}"
    return error_cls(message, path=path, operation=operation, details=details)


__all__ = [
    "ConfigError",
    "DeletionError",
    "FileSystemError",
    "ListingError",
    "M2PruneError",
    "ParseError",
    "create_file_error",
]
