from __future__ import annotations

import logging
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from xccovreport._meta import __version__, logger
from xccovreport.cli.exit_codes import EXIT_FAILURE, EXIT_OK
from xccovreport.core.config import LOG_FORMAT
from xccovreport.core.pipeline import build_report
from xccovreport.errors import ConfigurationError, NoCoverageDataError
from xccovreport.io import color_allowed, to_stdout, write_output
from xccovreport.render import RenderOptions, render

_BOOL_FALSE = False


class OutputFormat(StrEnum):
    HUMAN = "human"
    JSON = "json"


def _configure_runtime(*, quiet: bool, verbose: bool) -> None:
    """Configure logging based on *quiet*/*verbose*."""
    level = logging.ERROR if quiet else (logging.DEBUG if verbose else logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)


def _version_callback(value: bool) -> None:  # noqa: FBT001
    if value:
        typer.echo(f"xccovreport {__version__}")
        raise typer.Exit


def report_cmd(
    xcresult_file: Annotated[
        Path,
        typer.Option(
            "--xcresult-file",
            help="The path to the .xcresult bundle (or an exported xccov JSON report).",
        ),
    ],
    config_yaml_file: Annotated[
        Path | None,
        typer.Option(
            "--config-yaml-file",
            "--config",
            "-c",
            help="The path to optional configuration YAML file (default: ./.swiftcoverage.yml if present).",
        ),
    ] = None,
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", help="Output format.", case_sensitive=False),
    ] = OutputFormat.HUMAN,
    output: Annotated[
        Path | None,
        typer.Option("--output", help="Write output to PATH (use '-' for stdout)."),
    ] = None,
    color: Annotated[
        bool | None,
        typer.Option("--color/--no-color", help="Force or disable color (default: only on a terminal)"),
    ] = None,
    width: Annotated[
        int | None,
        typer.Option("--width", min=20, help="Wrap human output at this many columns (default: terminal width)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Emit diagnostic logging"),
    ] = _BOOL_FALSE,
    quiet: Annotated[
        bool,
        typer.Option("-q", "--quiet", help="Suppress warnings, emit only errors"),
    ] = _BOOL_FALSE,
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option("--version", help="Show version and exit", callback=_version_callback, is_eager=True),
    ] = _BOOL_FALSE,
) -> None:
    """Report per-target line coverage of an Xcode result bundle and enforce a minimum."""
    _configure_runtime(quiet=quiet, verbose=verbose)

    try:
        report = build_report(coverage_path=xcresult_file, config_path=config_yaml_file, cwd=Path.cwd())
    except ConfigurationError as exc:
        typer.echo(f"ERROR: invalid configuration: {exc}", err=True)
        raise typer.Exit(code=EXIT_FAILURE) from exc
    except NoCoverageDataError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_FAILURE) from exc
    except OSError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_FAILURE) from exc

    render_fmt = fmt.value
    use_color = color if color is not None else color_allowed(fmt=render_fmt, output=output)
    text = render(report, fmt=render_fmt, options=RenderOptions(color=use_color, width=width))
    write_output(text, output)

    if not report.verdict.passed:
        # the human report already ends with the message when it goes to stdout
        if render_fmt != OutputFormat.HUMAN or not to_stdout(output):
            typer.echo(report.verdict.message, err=True)
        logger.debug("coverage %.1f%% below minimum %.1f%%", report.verdict.actual, report.verdict.required)
        raise typer.Exit(code=EXIT_FAILURE)
    raise typer.Exit(code=EXIT_OK)


def register(app: typer.Typer) -> None:
    app.command("report")(report_cmd)


__all__ = ["OutputFormat", "register", "report_cmd"]
