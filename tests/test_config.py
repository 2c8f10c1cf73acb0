"""Tests for configuration loading and module side-effect behavior."""

from __future__ import annotations

import importlib
import logging
import sys
from typing import TYPE_CHECKING

import pytest

from xccovreport.core import config
from xccovreport.core.config import (
    DEFAULT_CONFIG_FILE,
    CoverageConfiguration,
    RuleSet,
    load_config,
    parse_config,
    resolve_config_path,
)
from xccovreport.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from _pytest.monkeypatch import MonkeyPatch


def test_get_schema_cached(monkeypatch: MonkeyPatch) -> None:
    """``get_schema`` should load each schema once and cache the result."""
    config.get_schema.cache_clear()
    calls = 0
    original = config.resources.files

    def tracking_files(package: str):
        nonlocal calls
        calls += 1
        return original(package)

    monkeypatch.setattr(config.resources, "files", tracking_files)

    schema1 = config.get_schema("config")
    schema2 = config.get_schema("config")

    assert schema1 == schema2
    assert calls == 1


def test_get_schema_unknown_name() -> None:
    with pytest.raises(ValueError, match="Unsupported schema"):
        config.get_schema("nope")


def test_import_has_no_side_effects(monkeypatch: MonkeyPatch) -> None:
    """Importing the package should not configure logging."""
    basic_called = False

    def fake_basic(*args, **kwargs):
        nonlocal basic_called
        basic_called = True

    monkeypatch.setattr(logging, "basicConfig", fake_basic)

    for name in [m for m in sys.modules if m.startswith("xccovreport")]:
        monkeypatch.delitem(sys.modules, name)

    importlib.import_module("xccovreport.cli")

    assert not basic_called


def test_empty_document_gives_defaults() -> None:
    assert parse_config(None) == CoverageConfiguration()
    assert parse_config({}) == CoverageConfiguration(min_coverage=85.0)


def test_full_document(config_file: Callable[..., Path]) -> None:
    path = config_file({
        "include": {"targets": ["^App"], "files": None},
        "exclude": {"targets": ["Tests$"], "files": ["Generated/", r"\.pb\.swift$"]},
        "minCoverage": 72.5,
    })
    assert load_config(path) == CoverageConfiguration(
        include=RuleSet(targets=("^App",), files=None),
        exclude=RuleSet(targets=("Tests$",), files=("Generated/", r"\.pb\.swift$")),
        min_coverage=72.5,
    )


def test_integer_min_coverage_is_a_percentage(config_file: Callable[..., Path]) -> None:
    assert load_config(config_file({"minCoverage": 90})).min_coverage == 90.0


@pytest.mark.parametrize(
    ("data", "pattern"),
    [
        ({"minCoverage": 150}, "minCoverage"),
        ({"minCoverage": -1}, "minCoverage"),
        ({"minCoverage": "high"}, "minCoverage"),
        ({"include": {"targets": "App"}}, "include/targets"),
        ({"exclude": {"paths": ["x"]}}, "exclude"),
        ({"unknown": 1}, "<root>"),
        (["not", "a", "mapping"], "<root>"),
    ],
)
def test_invalid_documents_rejected(data: object, pattern: str) -> None:
    with pytest.raises(ConfigurationError, match=pattern):
        parse_config(data)


def test_malformed_yaml_rejected(tmp_path: Path) -> None:
    path = tmp_path / "bad.yml"
    path.write_text("include: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="failed to parse configuration"):
        load_config(path)


def test_non_utf8_config_rejected(tmp_path: Path) -> None:
    path = tmp_path / "latin1.yml"
    path.write_bytes(b"minCoverage: \xff\xfe\n")
    with pytest.raises(ConfigurationError, match="not valid UTF-8"):
        load_config(path)


def test_json_documents_are_accepted(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"minCoverage": 50, "exclude": {"targets": ["Tests$"]}}', encoding="utf-8")
    assert load_config(path).exclude == RuleSet(targets=("Tests$",))


def test_resolve_config_path_prefers_explicit(tmp_path: Path) -> None:
    (tmp_path / DEFAULT_CONFIG_FILE).write_text("minCoverage: 10\n", encoding="utf-8")
    explicit = tmp_path / "other.yml"
    explicit.write_text("minCoverage: 20\n", encoding="utf-8")
    assert resolve_config_path(explicit, cwd=tmp_path) == explicit


def test_resolve_config_path_probes_default(tmp_path: Path) -> None:
    assert resolve_config_path(None, cwd=tmp_path) is None
    default = tmp_path / DEFAULT_CONFIG_FILE
    default.write_text("minCoverage: 10\n", encoding="utf-8")
    assert resolve_config_path(None, cwd=tmp_path) == default


def test_resolve_config_path_missing_explicit(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        resolve_config_path(tmp_path / "missing.yml", cwd=tmp_path)
