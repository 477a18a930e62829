"""Core protocols for mockroute.

- RequestHandler is the read-only view of a registered mock handler
- DiagnosticSink is where unhandled-request diagnostics are written
- UnhandledRequestCallback is the custom strategy hook
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mockroute._matchers import ValueMatcher
    from mockroute._request import HttpRequest
    from mockroute._resolver import PrintHandlers


@runtime_checkable
class RequestHandler(Protocol):
    """A registered handler, as far as unhandled-request resolution cares.

    Only the declared method and path are read. A plain string or an
    ExactMatcher is a literal; anything else (RegexMatcher, ``re.Pattern``)
    is a pattern and is never compiled here.
    """

    @property
    def method(self) -> str | ValueMatcher | object: ...

    @property
    def path(self) -> str | ValueMatcher | object: ...


@runtime_checkable
class DiagnosticSink(Protocol):
    """Two-channel text output. A ``logging.Logger`` satisfies it."""

    def warning(self, msg: str, /) -> None: ...

    def error(self, msg: str, /) -> None: ...


type UnhandledRequestCallback = Callable[
    [HttpRequest, PrintHandlers], Awaitable[None] | None
]
