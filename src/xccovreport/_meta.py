from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("xccov-report")

logger = logging.getLogger("xccovreport")

__all__ = ["__version__", "logger"]
