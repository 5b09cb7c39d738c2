"""Core infrastructure: errors and logging."""

from m2prune.core.errors import (
    ConfigError,
    DeletionError,
    FileSystemError,
    ListingError,
    M2PruneError,
    ParseError,
)


__all__ = [
    "ConfigError",
    "DeletionError",
    "FileSystemError",
    "ListingError",
    "M2PruneError",
    "ParseError",
]
