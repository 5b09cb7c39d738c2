"""CLI command modules."""

import typer

from m2prune.cli.commands.clean import register_commands as register_clean_commands


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Safe to call more than once.

    Args:
        app: The main Typer app
    """
    registered = {command.name for command in app.registered_commands}
    if "clean" not in registered:
        register_clean_commands(app)
