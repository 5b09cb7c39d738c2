"""Command-line interface for m2prune using Typer."""

from m2prune.cli.app import app, main


__all__ = ["app", "main"]
