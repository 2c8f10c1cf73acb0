"""Predicates deciding whether a target name or file path satisfies a rule."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Protocol

from xccovreport.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable


class Matcher(Protocol):
    def matches(self, identifier: str) -> bool: ...


@dataclass(frozen=True, slots=True)
class _Constant:
    result: bool

    def matches(self, identifier: str) -> bool:  # noqa: ARG002
        return self.result


ALWAYS: Final[Matcher] = _Constant(result=True)
NEVER: Final[Matcher] = _Constant(result=False)


@dataclass(frozen=True, slots=True)
class PatternSet:
    """Matches when any regular expression is found anywhere in the identifier.

    Patterns are compiled eagerly so that an invalid expression is reported
    when the rules are built, not halfway through a report.
    """

    patterns: tuple[str, ...]
    _compiled: tuple[re.Pattern[str], ...]

    def __init__(self, patterns: Iterable[str]) -> None:
        pats = tuple(str(p) for p in patterns)
        if not pats:
            msg = "pattern set must contain at least one pattern"
            raise ConfigurationError(msg)
        compiled: list[re.Pattern[str]] = []
        for pat in pats:
            try:
                compiled.append(re.compile(pat))
            except re.error as exc:
                msg = f"invalid regular expression {pat!r}: {exc}"
                raise ConfigurationError(msg) from exc
        object.__setattr__(self, "patterns", pats)
        object.__setattr__(self, "_compiled", tuple(compiled))

    def matches(self, identifier: str) -> bool:
        return any(rx.search(identifier) is not None for rx in self._compiled)


__all__ = ["ALWAYS", "NEVER", "Matcher", "PatternSet"]
