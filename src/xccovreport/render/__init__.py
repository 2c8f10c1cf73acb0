from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from xccovreport.render.human import render_human
from xccovreport.render.json import render_json

if TYPE_CHECKING:
    from xccovreport.core.report import Report


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Options that affect *presentation* only (not report content)."""

    color: bool = True
    width: int | None = None  # columns; None lets rich detect the terminal


def render(report: Report, *, fmt: str, options: RenderOptions) -> str:
    """Render a built Report to text.

    Parameters
    ----------
    report:
        Formatted report.
    fmt:
        One of: "human", "json".
    options:
        Presentation options; ignored by "json".
    """
    f = (fmt or "").strip().lower()

    if f == "human":
        return render_human(report, color=options.color, width=options.width)
    if f == "json":
        return render_json(report)
    msg = f"Unsupported format: {fmt!r}. Expected one of: human, json."
    raise ValueError(msg)


__all__ = ["RenderOptions", "render", "render_human", "render_json"]
