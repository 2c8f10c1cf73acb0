from __future__ import annotations

import typer
from typer.main import get_command

from xccovreport.cli import report


def create_app() -> typer.Typer:
    app = typer.Typer(
        help="Per-target line coverage reports for Xcode result bundles.",
        add_completion=False,
    )
    report.register(app)
    return app


# Built once at import; the console script and CliRunner tests both invoke this command.
cli = get_command(create_app())


def main() -> None:
    cli()


__all__ = ["cli", "create_app", "main"]
