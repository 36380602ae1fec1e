from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .configuration import ContextConfig, load_context_config, resolve_context_options
from .errors import InputValidationError, LintframeError
from .exit_codes import ExitCode
from .ingestion import lint_names, load_findings
from .orchestration import handle_domain_error, run_report
from .utils import expand_source_arguments

APP_NAME = "lintframe"
LOG_LEVEL_ENV = "LINTFRAME_LOG"
_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)

app = typer.Typer(
    name=APP_NAME,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def configure_logging(*, verbosity: int = 0) -> None:
    """Initialise application-wide logging on stderr.

    ``verbosity`` counts ``-v`` flags; a level name in ``LINTFRAME_LOG``
    takes precedence over it.
    """

    level = _resolve_level(verbosity)
    root = logging.getLogger()

    if getattr(configure_logging, "_configured", False):
        root.setLevel(level)
        for handler in root.handlers:
            handler.setLevel(level)
        configure_logging._level = level
        return

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))

    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    configure_logging._configured = True
    configure_logging._level = level


def _resolve_level(verbosity: int) -> int:
    override = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if override:
        level = logging.getLevelName(override)
        if isinstance(level, int):
            return level
    index = min(max(verbosity, 0), len(_VERBOSITY_LEVELS) - 1)
    return _VERBOSITY_LEVELS[index]


def _exit_with(error: LintframeError) -> typer.Exit:
    outcome = handle_domain_error(error)
    return typer.Exit(code=int(outcome.exit_code))


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase log verbosity (can be supplied multiple times).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the Lintframe version and exit.",
    ),
) -> None:
    """Configure logging and handle global options."""

    configure_logging(verbosity=verbose)

    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ExitCode.SUCCESS))

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=int(ExitCode.SUCCESS))


@app.command("render")
def render(
    findings: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Findings document (YAML or JSON) produced by the rule engine.",
    ),
    srcs: Optional[List[str]] = typer.Argument(
        None,
        metavar="[[@]SRCS]...",
        help="Only report these source files; '@file' reads a newline separated list.",
        show_default=False,
    ),
    before: Optional[str] = typer.Option(
        None,
        "--before",
        "-B",
        help="Number of lines to show before the flagged span (0-255).",
    ),
    after: Optional[str] = typer.Option(
        None,
        "--after",
        "-A",
        help="Number of lines to show after the flagged span (0-255).",
    ),
    context: Optional[str] = typer.Option(
        None,
        "--context",
        "-C",
        help="Number of lines to show before and after the flagged span (0-255).",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="YAML file providing default context lines.",
    ),
) -> None:
    """Render findings as annotated source excerpts."""

    logger = logging.getLogger("lintframe.cli")

    try:
        file_config = load_context_config(config) if config is not None else ContextConfig()
        options = resolve_context_options(before, after, context, config=file_config)
        sources = expand_source_arguments(srcs or ())
    except InputValidationError as exc:
        raise _exit_with(exc) from exc

    logger.debug("Context lines", extra={"extra_lines": options.extra_lines})
    outcome = run_report(findings, writer=sys.stdout, sources=sources, options=options)
    raise typer.Exit(code=int(outcome.exit_code))


@app.command("lints")
def lints(
    findings: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Findings document (YAML or JSON) produced by the rule engine.",
    ),
) -> None:
    """List the lint names present in a findings document."""

    try:
        loaded = load_findings(findings)
    except LintframeError as exc:
        raise _exit_with(exc) from exc

    for name in lint_names(loaded):
        typer.echo(name)
    raise typer.Exit(code=int(ExitCode.SUCCESS))


def entrypoint() -> None:
    """Execute the Typer application."""

    app()


__all__ = ["app", "entrypoint", "configure_logging", "ExitCode"]
