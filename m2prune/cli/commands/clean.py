"""Clean CLI command: prune superseded snapshot builds."""

import json
import sys
from pathlib import Path
from typing import Annotated

import typer

from m2prune.cli.app import AppContext
from m2prune.cli.decorators import handle_errors
from m2prune.cli.helpers.theme import ThemedConsole, get_themed_console
from m2prune.config.repository import resolve_repository_path, validate_repository_path
from m2prune.core.logging import setup_logging
from m2prune.core.structlog_logger import get_struct_logger_with_context
from m2prune.retention import ProcessStatus, RetentionStatistics, create_retention_engine
from m2prune.utils.formatting import format_size


def _print_summary(
    console: ThemedConsole, stats: RetentionStatistics, dry_run: bool
) -> None:
    if dry_run:
        console.print_success(f"Would delete {stats.deleted_files} file(s).")
        console.print_info(f"Reclaimable space {format_size(stats.reclaimed_bytes)}")
    else:
        console.print_success(f"Totally deleted {stats.deleted_files} file(s).")
        console.print_info(f"Reclaimed space {format_size(stats.reclaimed_bytes)}")

    if not stats.has_anomalies:
        return
    if stats.failed_deletes > 0:
        console.print_warning(f"Failed to delete {stats.failed_deletes} file(s).")
    if stats.skipped_files > 0:
        console.print_warning(
            f"Skipped {stats.skipped_files} file(s) with unparsable build names."
        )
    if stats.listing_failures > 0:
        console.print_warning(
            f"Could not list {stats.listing_failures} directory(ies)."
        )


@handle_errors
def clean(
    ctx: typer.Context,
    directory: Annotated[
        Path | None,
        typer.Option(
            "--dir",
            "-d",
            help="Repository root to clean (default: from config, Maven settings or ~/.m2/repository)",
        ),
    ] = None,
    verbose_files: Annotated[
        bool,
        typer.Option(
            "--verbose-files", "-V", help="Report every kept, deleted and skipped file"
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted without deleting"),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Print run statistics as JSON"),
    ] = False,
) -> None:
    """Delete all but the latest timestamped build of every snapshot version.

    Release versions and files that do not follow the timestamped snapshot
    naming scheme are never touched. Exits non-zero if any file could not be
    inspected or removed.
    """
    app_context: AppContext = ctx.obj
    config = app_context.user_config.data

    root = validate_repository_path(resolve_repository_path(directory, config))

    if json_output:
        # Keep stdout for the report
        setup_logging(
            log_level=app_context.log_level,
            log_file=app_context.log_file,
            json_logs=True,
            stream=sys.stderr,
        )

    dry_run = dry_run or config.dry_run
    verbose = (verbose_files or config.verbose) and not json_output

    logger = get_struct_logger_with_context(__name__, root=str(root), dry_run=dry_run)
    console = get_themed_console(icon_mode=app_context.icon_mode)
    if not json_output:
        console.print_info(f"Cleaning Maven local cache at '{root}'")

    engine = create_retention_engine(
        verbose=verbose, reporter=console.print_plain, dry_run=dry_run
    )
    logger.info("clean_started")
    status = engine.process_directory(root)
    logger.info(
        "clean_finished",
        status=status.name,
        deleted_files=engine.statistics.deleted_files,
        reclaimed_bytes=engine.statistics.reclaimed_bytes,
    )

    if json_output:
        report = {
            "repository": str(root),
            "dry_run": dry_run,
            "status": int(status),
            **engine.statistics.to_dict(),
        }
        typer.echo(json.dumps(report, indent=2))
    else:
        _print_summary(console, engine.statistics, dry_run)

    if status != ProcessStatus.OK:
        raise typer.Exit(int(status))


def register_commands(app: typer.Typer) -> None:
    """Register the clean command with the main app."""
    app.command(name="clean")(clean)
