"""Coverage classification against the configured minimum."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Bucket(StrEnum):
    """Threshold class of a coverage percentage."""

    ZERO = "zero"
    BELOW_MINIMUM = "below-minimum"
    AT_OR_ABOVE_MINIMUM = "at-or-above-minimum"


@dataclass(frozen=True, slots=True)
class Verdict:
    """Outcome of comparing overall coverage with the minimum."""

    passed: bool
    actual: float
    required: float
    message: str | None = None


def classify(coverage: float, min_coverage: float) -> Bucket:
    """Return the bucket of *coverage*; exactly ``0`` means no coverage data."""
    if coverage == 0:
        return Bucket.ZERO
    if coverage < min_coverage:
        return Bucket.BELOW_MINIMUM
    return Bucket.AT_OR_ABOVE_MINIMUM


def evaluate(overall: float, min_coverage: float) -> Verdict:
    if overall >= min_coverage:
        return Verdict(passed=True, actual=overall, required=min_coverage)
    msg = f"FAIL: Current coverage {overall:.1f}% is less than min {min_coverage:.1f}%"
    return Verdict(passed=False, actual=overall, required=min_coverage, message=msg)


__all__ = ["Bucket", "Verdict", "classify", "evaluate"]
