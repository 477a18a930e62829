"""Handler descriptors — the (method, path, origin) view of a handler.

Projection never compiles or runs a pattern: a declared value is either a
literal (``str`` or ExactMatcher) or, whatever else it is, a pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from mockroute._matchers import ExactMatcher
from mockroute._request import url_origin

if TYPE_CHECKING:
    from mockroute._request import HttpRequest
    from mockroute._types import RequestHandler


@dataclass(frozen=True, slots=True)
class DeclaredPattern:
    """A method or path declared as anything other than a literal string.

    ``source`` is kept as given (RegexMatcher, ``re.Pattern``, ...).
    """

    source: object


# Literal | Pattern, as declared on the handler.
type DeclaredValue = ExactMatcher | DeclaredPattern


@dataclass(frozen=True, slots=True)
class HandlerDescriptor:
    """Displayable signature of one registered handler.

    ``origin`` is the handler's own origin when its path is an absolute
    literal URL, otherwise the origin of the request being resolved
    (relative handlers are same-origin by convention). It is None when an
    absolute path has an origin that cannot be parsed.
    """

    method: DeclaredValue
    path: DeclaredValue
    origin: str | None

    @property
    def pathname(self) -> str | None:
        """Path component of a literal path, None for patterns."""
        match self.path:
            case ExactMatcher(value=value):
                if not _is_absolute(value):
                    return value
                return urlsplit(value).path or "/"
        return None


def declared_value(value: object) -> DeclaredValue:
    """Classify a declared method or path without compiling it."""
    match value:
        case str():
            return ExactMatcher(value)
        case ExactMatcher():
            return value
    return DeclaredPattern(value)


def describe_handler(handler: RequestHandler, request: HttpRequest) -> HandlerDescriptor:
    """Project a handler into a HandlerDescriptor relative to ``request``."""
    method = declared_value(handler.method)
    path = declared_value(handler.path)
    origin: str | None = request.origin
    if isinstance(path, ExactMatcher) and _is_absolute(path.value):
        try:
            origin = url_origin(path.value)
        except ValueError:
            origin = None
    return HandlerDescriptor(method=method, path=path, origin=origin)


def _is_absolute(value: str) -> bool:
    parts = urlsplit(value)
    return bool(parts.scheme and parts.netloc)
