from __future__ import annotations

from typing import TYPE_CHECKING

from xccovreport._meta import logger
from xccovreport.core.aggregate import aggregate
from xccovreport.core.config import CoverageConfiguration, load_config, resolve_config_path
from xccovreport.core.report import Report, format_report
from xccovreport.core.rules import resolve
from xccovreport.inputs.xcresult import load_coverage

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from xccovreport.core.model import RawTargetCoverage


def report_from_targets(
    targets: Iterable[RawTargetCoverage],
    config: CoverageConfiguration | None = None,
) -> Report:
    """Filter, aggregate and classify an in-memory coverage dataset."""
    config = config or CoverageConfiguration()
    rules = resolve(config)
    aggregated, overall = aggregate(targets, rules)
    return format_report(aggregated, overall, config.min_coverage)


def build_report(
    *,
    coverage_path: Path,
    config_path: Path | None,
    cwd: Path,
) -> Report:
    """Run the whole pipeline for one results archive.

    The configuration is loaded and every pattern compiled before the
    archive is read, so configuration errors surface first.
    """
    resolved = resolve_config_path(config_path, cwd=cwd)
    config = load_config(resolved) if resolved is not None else CoverageConfiguration()
    rules = resolve(config)

    targets = load_coverage(coverage_path)
    aggregated, overall = aggregate(targets, rules)
    logger.info("aggregated %d of %d target(s), overall %.1f%%", len(aggregated), len(targets), overall)
    return format_report(aggregated, overall, config.min_coverage)


__all__ = ["build_report", "report_from_targets"]
