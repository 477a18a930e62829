"""RestHandler — a mock handler keyed on HTTP method and path.

Method and path are each a literal string or a RegexMatcher. Matching:

| path declared as         | compared against          | rule     |
|--------------------------|---------------------------|----------|
| relative literal "/api"  | request pathname          | equality |
| absolute literal URL     | request origin + pathname | equality |
| RegexMatcher             | request origin + pathname | search   |
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

from mockroute._matchers import ExactMatcher, RegexMatcher, ValueMatcher, as_value_matcher
from mockroute._predicate import (
    MethodInput,
    PathInput,
    Predicate,
    SinglePredicate,
    UrlInput,
    and_predicate,
)
from mockroute._request import url_origin

if TYPE_CHECKING:
    from mockroute._request import HttpRequest


@dataclass(frozen=True, slots=True)
class RestHandler:
    """A registered REST mock handler.

    Plain strings given for ``method`` or ``path`` are stored as
    ExactMatcher. ``resolver`` is opaque to mockroute; it is whatever
    produces the mocked response once this handler has been picked.
    """

    method: ValueMatcher
    path: ValueMatcher
    resolver: Callable[..., Any] | None = field(default=None, compare=False)
    _predicate: Predicate = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", as_value_matcher(self.method))
        object.__setattr__(self, "path", as_value_matcher(self.path))
        object.__setattr__(self, "_predicate", self.to_predicate())

    def to_predicate(self) -> Predicate:
        """Convert the declared method and path to a predicate tree."""
        return and_predicate(
            [
                SinglePredicate(MethodInput(), self.method),
                _compile_path_match(self.path),
            ]
        )

    def matches(self, request: HttpRequest) -> bool:
        return self._predicate.evaluate(request)

    def __str__(self) -> str:
        return f"{self.method} {self.path}"


def _compile_path_match(path: ValueMatcher) -> SinglePredicate:
    """Compile a declared path to a predicate."""
    match path:
        case RegexMatcher():
            return SinglePredicate(UrlInput(), path)
        case ExactMatcher(value=value):
            origin = url_origin(value)
            if origin is None:
                return SinglePredicate(PathInput(), path)
            # Normalise the origin the same way HttpRequest does.
            pathname = urlsplit(value).path or "/"
            return SinglePredicate(UrlInput(), ExactMatcher(origin + pathname))
    msg = f"unknown path matcher: {path!r}"  # pragma: no cover
    raise ValueError(msg)  # pragma: no cover
