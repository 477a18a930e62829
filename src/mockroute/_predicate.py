"""Predicate composition — request field extraction + value matching.

SinglePredicate combines a RequestInput (extract) with a ValueMatcher
(match). And composes predicates with short-circuit evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mockroute._matchers import ValueMatcher
    from mockroute._request import HttpRequest


@dataclass(frozen=True, slots=True)
class MethodInput:
    """Extracts the HTTP method (case-sensitive)."""

    def get(self, request: HttpRequest, /) -> str | None:
        return request.method


@dataclass(frozen=True, slots=True)
class PathInput:
    """Extracts the request pathname (without query string)."""

    def get(self, request: HttpRequest, /) -> str | None:
        return request.path


@dataclass(frozen=True, slots=True)
class UrlInput:
    """Extracts origin + pathname (without query string)."""

    def get(self, request: HttpRequest, /) -> str | None:
        return request.clean_url


type RequestInput = MethodInput | PathInput | UrlInput


@dataclass(frozen=True, slots=True)
class SinglePredicate:
    """A single predicate: extract data, then match.

    If the input returns None the predicate is False without consulting
    the matcher.
    """

    input: RequestInput
    matcher: ValueMatcher

    def evaluate(self, request: HttpRequest) -> bool:
        value = self.input.get(request)
        if value is None:
            return False
        return self.matcher.matches(value)


@dataclass(frozen=True, slots=True)
class And:
    """Method and path predicates of one handler, all required."""

    predicates: tuple[Predicate, ...]

    def evaluate(self, request: HttpRequest) -> bool:
        return all(p.evaluate(request) for p in self.predicates)


type Predicate = SinglePredicate | And


def and_predicate(predicates: list[Predicate]) -> Predicate:
    """Compose predicates with AND semantics.

    - Single -> unwrapped (no wrapping overhead)
    - Otherwise -> And(predicates)

    Raises:
        ValueError: If ``predicates`` is empty.
    """
    if not predicates:
        msg = "and_predicate requires at least one predicate"
        raise ValueError(msg)
    if len(predicates) == 1:
        return predicates[0]
    return And(tuple(predicates))
