from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from jsonschema import validate

from xccovreport._meta import __version__
from xccovreport.core.config import get_schema

if TYPE_CHECKING:
    from xccovreport.core.report import Report, ReportRow, TargetTable


SCHEMA_ID = "https://example.com/xccovreport.report.schema.json"


def _value(row: ReportRow) -> dict[str, Any]:
    return {"coverage": row.coverage, "bucket": row.bucket.value}


def _target(table: TargetTable) -> dict[str, Any]:
    return {
        "target": table.target,
        **_value(table.total),
        "files": [{"file": r.label, **_value(r)} for r in table.rows],
    }


def render_json(report: Report) -> str:
    payload: dict[str, Any] = {
        "schema": SCHEMA_ID,
        "schema_version": 1,
        "tool": {"name": "xccovreport", "version": __version__},
        "min_coverage": report.min_coverage,
        "overall": _value(report.overall),
        "targets": [_target(t) for t in report.targets],
        "verdict": {"passed": report.verdict.passed, "message": report.verdict.message},
    }
    validate(payload, get_schema("report"))
    return json.dumps(payload, indent=2, sort_keys=True)


__all__ = ["render_json"]
