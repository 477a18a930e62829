"""Suggestion engine — "did you mean" candidates for an unmatched request.

Ranking rules, applied in order:

1. Only handlers whose method AND path are literals are candidates. A
   pattern can be neither printed as a concrete resource nor ranked by
   edit distance.
2. Only handlers on the request's origin are candidates.
3. Distance is the Levenshtein distance between the handler pathname and
   the request pathname. The method is displayed but never scored.
4. Stable ascending sort by distance: ties keep registration order.
5. At most MAX_SUGGESTIONS survive.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rapidfuzz.distance import Levenshtein

from mockroute._descriptor import HandlerDescriptor, describe_handler
from mockroute._matchers import ExactMatcher

if TYPE_CHECKING:
    from mockroute._request import HttpRequest
    from mockroute._types import RequestHandler

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 4


@dataclass(frozen=True, slots=True)
class Candidate:
    """An eligible handler paired with its distance to the request."""

    descriptor: HandlerDescriptor
    distance: int


@dataclass(frozen=True, slots=True)
class Suggestion:
    """A suggested resource, rendered as ``METHOD PATH``."""

    method: str
    path: str

    def __str__(self) -> str:
        return f"{self.method} {self.path}"


def rank_candidates(
    request: HttpRequest, handlers: Sequence[RequestHandler]
) -> list[Candidate]:
    """Return every eligible handler ranked by relevance (no cap)."""
    candidates: list[Candidate] = []
    for handler in handlers:
        descriptor = describe_handler(handler, request)
        pathname = _literal_pathname(descriptor)
        if pathname is None or descriptor.origin != request.origin:
            continue
        distance = Levenshtein.distance(pathname, request.path)
        candidates.append(Candidate(descriptor, distance))
    # sorted() is stable: equal distances keep registration order.
    return sorted(candidates, key=lambda c: c.distance)


def suggest_handlers(
    request: HttpRequest, handlers: Sequence[RequestHandler]
) -> tuple[Suggestion, ...]:
    """Return up to MAX_SUGGESTIONS handlers the caller most likely meant."""
    ranked = rank_candidates(request, handlers)
    suggestions = tuple(
        Suggestion(method=str(c.descriptor.method), path=str(c.descriptor.path))
        for c in ranked[:MAX_SUGGESTIONS]
    )
    logger.debug(
        "%d of %d handlers eligible as suggestions for %s %s",
        len(ranked),
        len(handlers),
        request.method,
        request.url,
    )
    return suggestions


def _literal_pathname(descriptor: HandlerDescriptor) -> str | None:
    """Pathname to rank by, or None when method or path is a pattern."""
    match descriptor:
        case HandlerDescriptor(method=ExactMatcher(), path=ExactMatcher()):
            return descriptor.pathname
        case _:
            return None
