"""Main CLI application for m2prune."""

import logging
import sys
from importlib.metadata import distribution
from typing import Annotated

import typer

from m2prune.cli.decorators.error_handling import print_stack_trace_if_verbose
from m2prune.config.user_config import UserConfig, create_user_config
from m2prune.core.errors import ConfigError
from m2prune.core.logging import setup_logging


__all__ = ["app", "main", "__version__", "AppContext"]


__version__ = distribution("m2prune").version

logger = logging.getLogger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        verbose: int = 0,
        log_file: str | None = None,
        config_file: str | None = None,
        no_emoji: bool = False,
    ):
        """Initialize AppContext.

        Args:
            verbose: Verbosity level
            log_file: Path to log file
            config_file: Path to configuration file
            no_emoji: Whether to disable emoji icons
        """
        self.verbose = verbose
        self.log_file = log_file
        self.config_file = config_file
        self.no_emoji = no_emoji
        self._user_config: UserConfig | None = None
        self.log_level = logging.WARNING

    @property
    def user_config(self) -> UserConfig:
        """Load the user configuration on first access.

        Raises:
            ConfigError: If the configuration cannot be loaded
        """
        if self._user_config is None:
            self._user_config = create_user_config(cli_config_path=self.config_file)
        return self._user_config

    @property
    def icon_mode(self) -> str:
        return "text" if self.no_emoji else "emoji"


app = typer.Typer(
    name="m2prune",
    help=f"""m2prune v{__version__}

Reclaims disk space in a local Maven repository by deleting superseded
timestamped snapshot builds, keeping the latest build of every snapshot version.

Common workflows:
  • Clean default repository:  m2prune clean
  • Clean another repository:  m2prune clean --dir /path/to/repository
  • Preview without deleting:  m2prune clean --dry-run --verbose-files""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to configuration file"),
    ] = None,
    no_emoji: Annotated[
        bool,
        typer.Option("--no-emoji", help="Disable emoji icons in output"),
    ] = False,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """m2prune - Maven local repository snapshot cleaner."""
    if version:
        print(f"m2prune v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    app_context = AppContext(
        verbose=verbose, log_file=log_file, config_file=config_file, no_emoji=no_emoji
    )
    ctx.obj = app_context

    log_level = logging.WARNING
    if debug or verbose >= 2:
        log_level = logging.DEBUG
    elif verbose == 1:
        log_level = logging.INFO
    else:
        try:
            log_level = app_context.user_config.get_log_level_int()
        except ConfigError:
            # Reported by the command once it reads the configuration
            log_level = logging.WARNING

    app_context.log_level = log_level
    setup_logging(log_level=log_level, log_file=log_file)


def main() -> int:
    """Main CLI entry point."""
    try:
        from m2prune.cli.commands import register_all_commands

        register_all_commands(app)
        app()
        exit_code = 0

    except SystemExit as e:
        exit_code = e.code if isinstance(e.code, int) else 0

    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        print_stack_trace_if_verbose()
        exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
