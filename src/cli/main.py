import asyncio
import os
import sys
from datetime import datetime
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console

from src.cli.formatters.report_formatter import format_usage
from src.cli.runner import run_wrapped_async

LOG_DIR_VAR_NAME = "WING_LOG_DIR"


def get_log_dir() -> Path:
    """Return $WING_LOG_DIR, or ~/.wing/logs."""
    override = os.environ.get(LOG_DIR_VAR_NAME, "").strip()
    if override:
        return Path(override)
    return Path.home() / ".wing" / "logs"


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> Path:
    """Configure loguru logging.

    Returns the path of the log file in use.
    """
    logger.remove()

    if log_file is None:
        log_dir = get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"wing_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"

    logger.add(
        log_file,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
        level="DEBUG",
        rotation="10 MB",
        encoding="utf-8",
    )

    if verbose:
        logger.add(
            sys.stderr,
            format="{time:HH:mm:ss} | {level: <8} | {message}",
            level="DEBUG",
        )

    return log_file


app = typer.Typer(
    name="wing",
    help="Run a command and report its output and timing to a Discord webhook.",
    add_completion=False,
)


@app.command(
    context_settings={
        # Everything from the program name on belongs to the child
        "allow_interspersed_args": False,
        "ignore_unknown_options": True,
    },
)
def wing(
    command: list[str] | None = typer.Argument(None, help="Program to run followed by its arguments"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Write logs to this file"),
) -> None:
    """Run a command, forward its output live, and report it to a webhook."""
    if not command:
        Console(stderr=True, highlight=False, soft_wrap=True).print(format_usage())
        raise typer.Exit(1)

    setup_logging(verbose=verbose, log_file=log_file)

    program, *args = command
    exit_code = asyncio.run(run_wrapped_async(program, args))
    raise typer.Exit(exit_code)


if __name__ == "__main__":
    app()
