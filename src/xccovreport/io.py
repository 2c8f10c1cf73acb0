"""Output destinations for rendered reports."""

from __future__ import annotations

import sys
from pathlib import Path

import click
import click.utils as click_utils

STDOUT = Path("-")


def to_stdout(destination: Path | None) -> bool:
    return destination is None or destination == STDOUT


def write_output(text: str, destination: Path | None) -> None:
    """Echo *text* to stdout, or save it to *destination* ending in exactly one newline."""
    if destination is None or destination == STDOUT:
        click.echo(text, color=True)  # colour was already decided by the renderer
        return
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text.rstrip("\n") + "\n", encoding="utf-8")


def color_allowed(*, fmt: str, output: Path | None) -> bool:
    """Return whether the destination can show ANSI colour for *fmt*."""
    if fmt != "human" or not to_stdout(output):
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty()) and not click_utils.should_strip_ansi(sys.stdout)


__all__ = ["STDOUT", "color_allowed", "to_stdout", "write_output"]
