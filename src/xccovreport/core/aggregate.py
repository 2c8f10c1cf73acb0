from __future__ import annotations

from typing import TYPE_CHECKING

from xccovreport._meta import logger
from xccovreport.core.model import FULL_COVERAGE, FileCoverage, TargetCoverage

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from xccovreport.core.model import RawFileCoverage, RawTargetCoverage
    from xccovreport.core.rules import Rules


def mean(values: Sequence[float]) -> float:
    """Unweighted arithmetic mean; ``0`` for an empty sequence."""
    return sum(values) / len(values) if values else 0.0


def _aggregate_files(files: Iterable[RawFileCoverage], rules: Rules) -> tuple[FileCoverage, ...]:
    out: list[FileCoverage] = []
    for f in files:
        allowed = rules.allow_file(f.path)
        logger.debug("file filter %s allow=%s", f.path, allowed)
        if allowed:
            out.append(FileCoverage(file=f.name, coverage=FULL_COVERAGE * f.line_coverage))
    return tuple(out)


def aggregate(
    targets: Iterable[RawTargetCoverage],
    rules: Rules,
) -> tuple[tuple[TargetCoverage, ...], float]:
    """Filter *targets* with *rules* and compute per-target and overall coverage.

    Both levels are plain means: a target is the mean of its included files
    and the overall value is the mean of the included targets. A target that
    keeps no files still counts, with coverage ``0``.
    """
    result: list[TargetCoverage] = []
    for target in targets:
        allowed = rules.allow_target(target.name)
        logger.debug("target filter %s allow=%s", target.name, allowed)
        if not allowed:
            continue
        files = _aggregate_files(target.files, rules)
        coverage = mean([f.coverage for f in files])
        result.append(TargetCoverage(target=target.name, coverage=coverage, files=files))

    overall = mean([t.coverage for t in result])
    return tuple(result), overall


__all__ = ["aggregate", "mean"]
