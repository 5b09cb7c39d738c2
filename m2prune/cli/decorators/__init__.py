"""Decorators for CLI commands."""

from m2prune.cli.decorators.error_handling import handle_errors


__all__ = ["handle_errors"]
