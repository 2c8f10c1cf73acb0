from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from xccovreport.core.thresholds import Bucket

if TYPE_CHECKING:
    from collections.abc import Iterable

    from xccovreport.core.report import Report, ReportRow

_BUCKET_STYLES: dict[Bucket, str] = {
    Bucket.ZERO: "red",
    Bucket.BELOW_MINIMUM: "yellow",
    Bucket.AT_OR_ABOVE_MINIMUM: "green",
}


# --------------------------- Formatting --------------------------------------
def _style_value(row: ReportRow) -> str:
    style = _BUCKET_STYLES[row.bucket]
    return f"[{style}]{row.display}[/{style}]"


# --------------------------- Tables ------------------------------------------
def _build_table(title: str, label_header: str, rows: Iterable[ReportRow], total: ReportRow) -> Table:
    table = Table(title=escape(title), box=box.SIMPLE_HEAVY, header_style="bold")

    table.add_column(label_header, overflow="fold")
    table.add_column("Coverage, %", justify="right")

    for r in rows:
        table.add_row(escape(r.label), _style_value(r))

    table.add_section()
    table.add_row(f"[bold]{total.label}[/bold]", f"[bold]{_style_value(total)}[/bold]")
    return table


def render_human(report: Report, *, color: bool = True, width: int | None = None) -> str:
    """Render the total line, per-target tables, summary table and verdict."""
    buf = StringIO()
    console = Console(file=buf, force_terminal=color, no_color=not color, width=width, highlight=False)

    overall = report.overall
    style = _BUCKET_STYLES[overall.bucket]
    console.print(f"Total coverage: [{style}]{overall.coverage:.1f}%[/{style}]")

    for target in report.targets:
        console.print()
        console.print(_build_table(target.target, "File", target.rows, target.total))

    console.print()
    console.print(_build_table("Summary", "Target", report.summary.rows, report.summary.total))

    if not report.verdict.passed and report.verdict.message:
        console.print()
        console.print(f"[bold red]{escape(report.verdict.message)}[/bold red]")

    return buf.getvalue().rstrip()


__all__ = ["render_human"]
