"""Centralised exception hierarchy for xccovreport."""

from __future__ import annotations


class XccovReportError(Exception):
    """Base class for all custom xccovreport exceptions."""


class ConfigurationError(XccovReportError):
    """Configuration document or one of its patterns is invalid."""


class NoCoverageDataError(XccovReportError):
    """No coverage data could be extracted from the results archive."""


class CoverageDataError(NoCoverageDataError):
    """Coverage data was found but is not a valid xccov report."""


__all__ = [
    "ConfigurationError",
    "CoverageDataError",
    "NoCoverageDataError",
    "XccovReportError",
]
