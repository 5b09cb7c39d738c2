"""Adapters for external systems."""

from .file_adapter import FileAdapter, FileSystemAdapter, create_file_adapter


__all__ = ["FileAdapter", "FileSystemAdapter", "create_file_adapter"]
