"""Filtering, aggregation and classification of xccov line coverage."""

from xccovreport.core.aggregate import aggregate, mean
from xccovreport.core.config import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_MIN_COVERAGE,
    LOG_FORMAT,
    CoverageConfiguration,
    RuleSet,
    get_schema,
    load_config,
    parse_config,
    resolve_config_path,
)
from xccovreport.core.matchers import ALWAYS, NEVER, Matcher, PatternSet
from xccovreport.core.model import (
    FileCoverage,
    RawFileCoverage,
    RawTargetCoverage,
    TargetCoverage,
)
from xccovreport.core.report import (
    Report,
    ReportRow,
    SummaryTable,
    TargetTable,
    format_report,
    format_value,
)
from xccovreport.core.rules import Rules, resolve
from xccovreport.core.thresholds import Bucket, Verdict, classify, evaluate

__all__ = [
    "ALWAYS",
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_MIN_COVERAGE",
    "LOG_FORMAT",
    "NEVER",
    "Bucket",
    "CoverageConfiguration",
    "FileCoverage",
    "Matcher",
    "PatternSet",
    "RawFileCoverage",
    "RawTargetCoverage",
    "Report",
    "ReportRow",
    "RuleSet",
    "Rules",
    "SummaryTable",
    "TargetCoverage",
    "TargetTable",
    "Verdict",
    "aggregate",
    "classify",
    "evaluate",
    "format_report",
    "format_value",
    "get_schema",
    "load_config",
    "mean",
    "parse_config",
    "resolve",
    "resolve_config_path",
]
