from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from xccovreport.core.matchers import ALWAYS, NEVER, Matcher, PatternSet

if TYPE_CHECKING:
    from collections.abc import Sequence

    from xccovreport.core.config import CoverageConfiguration


@dataclass(frozen=True, slots=True)
class Rules:
    """Effective include/exclude matchers for targets and files."""

    include_targets: Matcher = ALWAYS
    exclude_targets: Matcher = NEVER
    include_files: Matcher = ALWAYS
    exclude_files: Matcher = NEVER

    def allow_target(self, name: str) -> bool:
        # exclusion vetoes inclusion
        return self.include_targets.matches(name) and not self.exclude_targets.matches(name)

    def allow_file(self, path: str) -> bool:
        return self.include_files.matches(path) and not self.exclude_files.matches(path)


def _matcher(patterns: Sequence[str] | None, *, default: Matcher) -> Matcher:
    if not patterns:
        return default
    return PatternSet(patterns)


def resolve(config: CoverageConfiguration | None) -> Rules:
    """Build the four effective matchers from *config*.

    Missing or empty include lists match everything; missing or empty exclude
    lists match nothing. Raises :class:`ConfigurationError` for any pattern
    that is not a valid regular expression.
    """
    if config is None:
        return Rules()

    include = config.include
    exclude = config.exclude
    return Rules(
        include_targets=_matcher(include.targets if include else None, default=ALWAYS),
        exclude_targets=_matcher(exclude.targets if exclude else None, default=NEVER),
        include_files=_matcher(include.files if include else None, default=ALWAYS),
        exclude_files=_matcher(exclude.files if exclude else None, default=NEVER),
    )


__all__ = ["Rules", "resolve"]
