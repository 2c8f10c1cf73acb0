from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from xccovreport.core.model import RawFileCoverage, RawTargetCoverage

TargetsSpec = Mapping[str, Sequence[tuple[str, float]]]


def make_targets(spec: TargetsSpec) -> tuple[RawTargetCoverage, ...]:
    """Build raw targets from ``{target: [(file name, fraction), ...]}``."""
    return tuple(
        RawTargetCoverage(
            name=target,
            files=tuple(
                RawFileCoverage(name=name, path=f"/src/{target}/{name}", line_coverage=frac)
                for name, frac in files
            ),
        )
        for target, files in spec.items()
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def xccov_report_content() -> Callable[[TargetsSpec], str]:
    def build(spec: TargetsSpec) -> str:
        targets = [
            {
                "name": target,
                "lineCoverage": 0,
                "files": [
                    {"name": name, "path": f"/src/{target}/{name}", "lineCoverage": frac}
                    for name, frac in files
                ],
            }
            for target, files in spec.items()
        ]
        return json.dumps({"lineCoverage": 0, "targets": targets})

    return build


@pytest.fixture
def xccov_report_file(
    tmp_path: Path,
    xccov_report_content: Callable[[TargetsSpec], str],
) -> Callable[..., Path]:
    def write(spec: TargetsSpec, *, filename: str = "coverage.json") -> Path:
        report = tmp_path / filename
        report.write_text(xccov_report_content(spec), encoding="utf-8")
        return report

    return write


@pytest.fixture
def config_file(tmp_path: Path) -> Callable[..., Path]:
    def write(data: object, *, filename: str = "coverage.yml") -> Path:
        path = tmp_path / filename
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return write


@pytest.fixture
def raw_targets() -> Callable[[TargetsSpec], tuple[RawTargetCoverage, ...]]:
    return make_targets
