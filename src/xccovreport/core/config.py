"""Configuration model, loader and constants for ``xccovreport``."""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import cache
from importlib import resources
from typing import TYPE_CHECKING, Any, cast

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from xccovreport._meta import logger
from xccovreport.errors import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

# Configuration file probed in the working directory when none is given.
DEFAULT_CONFIG_FILE = ".swiftcoverage.yml"

# Minimum overall coverage, as a percentage in [0, 100].
DEFAULT_MIN_COVERAGE = 85.0

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"


_SCHEMA_FILES: dict[str, str] = {
    "config": "config.schema.json",
    "report": "report.schema.json",
}


@cache
def get_schema(name: str = "report") -> dict[str, object]:
    """Load and cache one of the bundled JSON schemas."""
    try:
        filename = _SCHEMA_FILES[name]
    except KeyError as exc:
        choices = ", ".join(sorted(_SCHEMA_FILES))
        msg = f"Unsupported schema: {name!r}. Available schemas: {choices}"
        raise ValueError(msg) from exc
    return json.loads(resources.files("xccovreport.data").joinpath(filename).read_text(encoding="utf-8"))


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Regular-expression patterns applied to target names and file paths."""

    targets: tuple[str, ...] | None = None
    files: tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True)
class CoverageConfiguration:
    include: RuleSet | None = None
    exclude: RuleSet | None = None
    min_coverage: float = DEFAULT_MIN_COVERAGE


def _rule_set(data: dict[str, Any] | None) -> RuleSet | None:
    if data is None:
        return None
    targets = data.get("targets")
    files = data.get("files")
    return RuleSet(
        targets=tuple(targets) if targets is not None else None,
        files=tuple(files) if files is not None else None,
    )


def parse_config(data: object) -> CoverageConfiguration:
    """Validate a decoded configuration document and build the model."""
    if data is None:
        return CoverageConfiguration()

    first = best_match(Draft202012Validator(get_schema("config")).iter_errors(data))
    if first is not None:
        where = "/".join(str(p) for p in first.path) or "<root>"
        msg = f"invalid configuration at {where}: {first.message}"
        raise ConfigurationError(msg)

    doc = cast("dict[str, Any]", data)
    return CoverageConfiguration(
        include=_rule_set(doc.get("include")),
        exclude=_rule_set(doc.get("exclude")),
        min_coverage=float(doc.get("minCoverage", DEFAULT_MIN_COVERAGE)),
    )


def load_config(path: Path) -> CoverageConfiguration:
    """Read and parse the YAML (or JSON) configuration at *path*."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        msg = f"configuration {path} is not valid UTF-8: {exc}"
        raise ConfigurationError(msg) from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        msg = f"failed to parse configuration {path}: {exc}"
        raise ConfigurationError(msg) from exc
    config = parse_config(data)
    logger.debug("loaded configuration from %s: %s", path, config)
    return config


def resolve_config_path(explicit: Path | None, *, cwd: Path) -> Path | None:
    """Return the configuration file to use, or ``None`` for defaults."""
    if explicit is not None:
        if not explicit.is_file():
            msg = f"configuration file not found: {explicit}"
            raise ConfigurationError(msg)
        return explicit
    candidate = cwd / DEFAULT_CONFIG_FILE
    if candidate.is_file():
        logger.info("using configuration %s", candidate)
        return candidate
    return None


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_MIN_COVERAGE",
    "LOG_FORMAT",
    "CoverageConfiguration",
    "RuleSet",
    "get_schema",
    "load_config",
    "parse_config",
    "resolve_config_path",
]
