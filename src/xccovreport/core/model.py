"""Raw and aggregated coverage records."""

from __future__ import annotations

from dataclasses import dataclass

FULL_COVERAGE: float = 100.0


# -----------------------------------------------------------------------------
# Provider records (as reported by xccov)
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RawFileCoverage:
    """Line coverage of one source file, as a fraction in [0, 1]."""

    name: str
    path: str
    line_coverage: float


@dataclass(frozen=True, slots=True)
class RawTargetCoverage:
    """A build target and the files it reports, in provider order."""

    name: str
    files: tuple[RawFileCoverage, ...] = ()


# -----------------------------------------------------------------------------
# Aggregates (percentages in [0, 100])
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FileCoverage:
    file: str
    coverage: float


@dataclass(frozen=True, slots=True)
class TargetCoverage:
    """Unweighted mean of the included files of one target.

    A target whose files were all filtered out keeps ``coverage == 0`` and an
    empty ``files`` tuple.
    """

    target: str
    coverage: float
    files: tuple[FileCoverage, ...] = ()


__all__ = [
    "FULL_COVERAGE",
    "FileCoverage",
    "RawFileCoverage",
    "RawTargetCoverage",
    "TargetCoverage",
]
