"""Main CLI application entry point.

Defines the Typer application. The only option is ``--dry``; everything
else comes from the configuration file (LOGSWEEP_CONFIG, or
~/.config/logsweep/config.toml).
"""

import logging
from typing import Annotated

import typer
from rich.markup import escape

from logsweep.cli.display import print_summary
from logsweep.core.config import ConfigurationError, load_config
from logsweep.core.logging_config import configure_logging
from logsweep.rotation.orchestrator import run_all
from logsweep.utils.formatting import print_error, print_warning

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="logsweep",
    help="Compress idle log files and delete expired archives.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.command()
def main(
    dry: Annotated[
        bool,
        typer.Option(
            "--dry",
            help="Show what would be compressed and deleted without changing anything.",
        ),
    ] = False,
) -> None:
    """logsweep - policy-driven log compression and retention.

    Compresses files matched by the configured patterns once they are
    idle, not open and not blacklisted, then deletes compressed files
    older than the retention window. Per-file errors are reported in
    the summary and do not affect the exit code.
    """
    try:
        config = load_config()
    except ConfigurationError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if dry:
        config = config.model_copy(update={"dry_run": True})

    try:
        configure_logging(config)
    except OSError as e:
        print_warning(
            escape(f"Cannot write log file {config.log_file} ({e}), logging to stdout only")
        )
        config = config.model_copy(update={"log_enabled": False})
        configure_logging(config)

    try:
        summary = run_all(config)
    except ConfigurationError as e:
        logger.error("%s", e)
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_summary(summary, dry_run=config.dry_run)


if __name__ == "__main__":
    app()
