"""Extract per-target line coverage from Xcode result bundles.

Coverage is read from the JSON produced by ``xcrun xccov view --report --json``.
Either a ``.xcresult`` bundle (exported on the fly) or an already exported
``.json`` report can be given.
"""

from __future__ import annotations

import json
import math
import subprocess
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from xccovreport._meta import logger
from xccovreport.core.model import RawFileCoverage, RawTargetCoverage
from xccovreport.errors import CoverageDataError, NoCoverageDataError

if TYPE_CHECKING:
    from pathlib import Path

XCCOV_COMMAND: tuple[str, ...] = ("xcrun", "xccov", "view", "--report", "--json")


def _require(entry: Mapping[str, object], key: str, kind: type | tuple[type, ...], where: str) -> object:
    value = entry.get(key)
    if not isinstance(value, kind) or isinstance(value, bool):
        msg = f"{where}: missing or invalid {key!r}"
        raise CoverageDataError(msg)
    return value


def _fraction(value: float, where: str) -> float:
    if not math.isfinite(value):
        msg = f"{where}: lineCoverage must be a finite number, got {value}"
        raise CoverageDataError(msg)
    if 0.0 <= value <= 1.0:
        return float(value)
    clamped = min(max(float(value), 0.0), 1.0)
    logger.warning("%s: lineCoverage %s out of range, clamped to %s", where, value, clamped)
    return clamped


def _parse_file(entry: object, where: str) -> RawFileCoverage:
    if not isinstance(entry, Mapping):
        msg = f"{where}: expected an object"
        raise CoverageDataError(msg)
    name = str(_require(entry, "name", str, where))
    path = str(_require(entry, "path", str, where))
    cov = float(_require(entry, "lineCoverage", (int, float), where))  # type: ignore[arg-type]
    return RawFileCoverage(name=name, path=path, line_coverage=_fraction(cov, where))


def _parse_target(entry: object, where: str) -> RawTargetCoverage:
    if not isinstance(entry, Mapping):
        msg = f"{where}: expected an object"
        raise CoverageDataError(msg)
    name = str(_require(entry, "name", str, where))
    files = entry.get("files", [])
    if not isinstance(files, Sequence) or isinstance(files, str):
        msg = f"{where}: 'files' must be a list"
        raise CoverageDataError(msg)
    return RawTargetCoverage(
        name=name,
        files=tuple(_parse_file(f, f"{where}.files[{i}]") for i, f in enumerate(files)),
    )


def parse_report(payload: object) -> tuple[RawTargetCoverage, ...]:
    """Build raw target records from a decoded xccov JSON report."""
    if not isinstance(payload, Mapping) or "targets" not in payload:
        msg = "no coverage information found in report"
        raise NoCoverageDataError(msg)
    targets = payload["targets"]
    if not isinstance(targets, Sequence) or isinstance(targets, str):
        msg = "'targets' must be a list"
        raise CoverageDataError(msg)
    return tuple(_parse_target(t, f"targets[{i}]") for i, t in enumerate(targets))


def _export_xcresult(bundle: Path) -> str:
    cmd = [*XCCOV_COMMAND, str(bundle)]
    logger.debug("running %s", " ".join(cmd))
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)  # noqa: S603
    except FileNotFoundError as exc:
        msg = f"cannot extract coverage from {bundle}: {XCCOV_COMMAND[0]} is not available"
        raise NoCoverageDataError(msg) from exc
    if proc.returncode != 0:
        detail = proc.stderr.strip() or f"exit status {proc.returncode}"
        msg = f"no coverage information found in {bundle}: {detail}"
        raise NoCoverageDataError(msg)
    return proc.stdout


def load_coverage(path: Path) -> tuple[RawTargetCoverage, ...]:
    """Return the coverage of every target recorded in *path*.

    Raises
    ------
    NoCoverageDataError
        The path does not exist, xccov could not export it, or the export
        holds no coverage report.
    CoverageDataError
        The report exists but its entries are malformed.
    """
    if not path.exists():
        msg = f"results archive not found: {path}"
        raise NoCoverageDataError(msg)

    if path.is_file() and path.suffix.lower() == ".json":
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            msg = f"no coverage information found in {path}: not valid UTF-8 ({exc})"
            raise NoCoverageDataError(msg) from exc
    else:
        text = _export_xcresult(path)

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"no coverage information found in {path}: {exc}"
        raise NoCoverageDataError(msg) from exc

    targets = parse_report(payload)
    logger.info("loaded coverage for %d target(s) from %s", len(targets), path)
    return targets


__all__ = ["XCCOV_COMMAND", "load_coverage", "parse_report"]
