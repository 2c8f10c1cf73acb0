from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from xccovreport.core.thresholds import Bucket, Verdict, classify, evaluate

if TYPE_CHECKING:
    from collections.abc import Sequence

    from xccovreport.core.model import TargetCoverage

TOTAL_LABEL = "TOTAL"
ZERO_PLACEHOLDER = "-"


# -----------------------------------------------------------------------------
# Row-oriented report model (what renderers consume)
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ReportRow:
    label: str
    coverage: float
    bucket: Bucket

    @property
    def display(self) -> str:
        return format_value(self.coverage, self.bucket)


@dataclass(frozen=True, slots=True)
class TargetTable:
    """Files of one target, sorted by file name, followed by the target mean."""

    target: str
    rows: tuple[ReportRow, ...]
    total: ReportRow


@dataclass(frozen=True, slots=True)
class SummaryTable:
    """One row per target in aggregation order, followed by the overall mean."""

    rows: tuple[ReportRow, ...]
    total: ReportRow


@dataclass(frozen=True, slots=True)
class Report:
    min_coverage: float
    overall: ReportRow
    targets: tuple[TargetTable, ...]
    summary: SummaryTable
    verdict: Verdict


def format_value(coverage: float, bucket: Bucket) -> str:
    if bucket is Bucket.ZERO:
        return ZERO_PLACEHOLDER
    return f"{coverage:.1f}"


def _row(label: str, coverage: float, min_coverage: float) -> ReportRow:
    return ReportRow(label=label, coverage=coverage, bucket=classify(coverage, min_coverage))


def _target_table(target: TargetCoverage, min_coverage: float) -> TargetTable:
    files = sorted(target.files, key=lambda f: f.file)
    return TargetTable(
        target=target.target,
        rows=tuple(_row(f.file, f.coverage, min_coverage) for f in files),
        total=_row(TOTAL_LABEL, target.coverage, min_coverage),
    )


def format_report(
    targets: Sequence[TargetCoverage],
    overall: float,
    min_coverage: float,
) -> Report:
    """Turn aggregated coverage into classified tables and a verdict."""
    overall_row = _row(TOTAL_LABEL, overall, min_coverage)
    return Report(
        min_coverage=min_coverage,
        overall=overall_row,
        targets=tuple(_target_table(t, min_coverage) for t in targets),
        summary=SummaryTable(
            rows=tuple(_row(t.target, t.coverage, min_coverage) for t in targets),
            total=overall_row,
        ),
        verdict=evaluate(overall, min_coverage),
    )


__all__ = [
    "TOTAL_LABEL",
    "ZERO_PLACEHOLDER",
    "Report",
    "ReportRow",
    "SummaryTable",
    "TargetTable",
    "format_report",
    "format_value",
]
