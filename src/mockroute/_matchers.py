"""Value matchers for handler methods and paths.

A handler declares its method and path either as a literal string or as a
pattern. The two arms are distinct frozen dataclasses so code that only
makes sense for literals (suggestion ranking, display) can pattern-match
on ExactMatcher and never see a pattern by accident.

Regex uses ``google-re2`` for guaranteed linear-time matching. RE2 does not
support backreferences or lookahead/lookbehind because they require
backtracking, so patterns using them are rejected at compile time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

import re2

from mockroute._errors import MatcherError


@dataclass(frozen=True, slots=True)
class ExactMatcher:
    """Literal string, matched by case-sensitive equality."""

    value: str

    def matches(self, value: str | None, /) -> bool:
        return isinstance(value, str) and value == self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class RegexMatcher:
    """Regular expression pattern.

    Compiled at construction time. Uses search (not fullmatch), so anchor
    the pattern to require a full match.

    Raises:
        MatcherError: If the pattern is not valid RE2 syntax.
    """

    pattern: str
    _compiled: re2.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re2.compile(self.pattern)
        except re2.error as e:
            msg = f'invalid regex pattern "{self.pattern}": {e}'
            raise MatcherError(msg) from e
        object.__setattr__(self, "_compiled", compiled)

    def matches(self, value: str | None, /) -> bool:
        if not isinstance(value, str):
            return False
        return self._compiled.search(value) is not None

    def __str__(self) -> str:
        return f"/{self.pattern}/"


# Literal | Pattern: the only two shapes a method or path can take.
type ValueMatcher = ExactMatcher | RegexMatcher


def as_value_matcher(value: str | ValueMatcher | re.Pattern[str]) -> ValueMatcher:
    """Coerce a declared method or path into a ValueMatcher.

    Plain strings are literals. Compiled ``re`` patterns are recompiled with
    RE2. Anything else is rejected.

    Raises:
        MatcherError: If the value has an unsupported type.
    """
    match value:
        case str():
            return ExactMatcher(value)
        case ExactMatcher() | RegexMatcher():
            return value
        case re.Pattern():
            return RegexMatcher(value.pattern)
    msg = f"expected a string or a value matcher, got {type(value).__name__}"
    raise MatcherError(msg)
