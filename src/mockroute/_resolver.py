"""Strategy resolver — decides what happens to an unmatched request.

Each call is a one-shot evaluation:

1. Parse the strategy (ConfigurationError on an unknown value, before
   anything is printed).
2. Rank suggestions and render the warning and error texts once.
3. Dispatch:

| strategy | diagnostic          | outcome                         |
|----------|---------------------|---------------------------------|
| bypass   | none                | return                          |
| warn     | warning channel     | return                          |
| error    | error channel       | raise UnhandledRequestError     |
| custom   | whatever it prints  | return, or raise what it raised |

The diagnostic is always written before the function returns or raises.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from mockroute._config import (
    DEFAULT_STRATEGY,
    BypassStrategy,
    CustomStrategy,
    ErrorStrategy,
    WarnStrategy,
    parse_strategy,
)
from mockroute._errors import UnhandledRequestError
from mockroute._messages import format_message, format_unhandled_request
from mockroute._suggestions import suggest_handlers

if TYPE_CHECKING:
    from mockroute._config import Strategy
    from mockroute._request import HttpRequest
    from mockroute._types import DiagnosticSink, RequestHandler, UnhandledRequestCallback

logger = logging.getLogger(__name__)

# Library diagnostics go to the package logger unless a sink is given.
default_sink: DiagnosticSink = logging.getLogger("mockroute")

ERROR_STRATEGY_MESSAGE = format_message(
    'Cannot bypass a request when using the "error" strategy '
    'for the "onUnhandledRequest" option.'
)


@dataclass(slots=True)
class PrintHandlers:
    """The built-in reactions, callable from a custom strategy.

    ``warning()`` and ``error()`` produce exactly the diagnostic (and, for
    ``error()``, the failure) of the "warn" and "error" strategies.
    """

    _sink: DiagnosticSink = field(repr=False)
    _warning_text: str = field(repr=False)
    _error_text: str = field(repr=False)
    _raised: UnhandledRequestError | None = field(default=None, init=False, repr=False)

    def warning(self) -> None:
        """Print the unhandled-request warning."""
        self._sink.warning(self._warning_text)

    def error(self) -> None:
        """Print the unhandled-request error and reject the request.

        Raises:
            UnhandledRequestError: Always.
        """
        if self._raised is not None:
            raise self._raised
        self._sink.error(self._error_text)
        self._raised = UnhandledRequestError(ERROR_STRATEGY_MESSAGE)
        raise self._raised

    @property
    def raised(self) -> UnhandledRequestError | None:
        """The error raised by ``error()``, if it was called."""
        return self._raised


async def on_unhandled_request(
    request: HttpRequest,
    handlers: Sequence[RequestHandler],
    strategy: object = DEFAULT_STRATEGY,
    *,
    sink: DiagnosticSink | None = None,
) -> None:
    """React to a request that matched none of ``handlers``.

    ``strategy`` is "bypass", "warn", "error", a callback
    ``(request, print_handlers)`` (sync or async), or a parsed Strategy.

    Returns normally when the request may proceed unmocked.

    Raises:
        ConfigurationError: If ``strategy`` is not supported.
        UnhandledRequestError: If the strategy rejects the request.
        Exception: Anything the custom callback raises, unwrapped.
    """
    parsed = parse_strategy(strategy)
    print_handlers = create_print_handlers(
        request, handlers, sink if sink is not None else default_sink
    )
    logger.debug("resolving unhandled %s %s with %r", request.method, request.url, parsed)
    await _dispatch(parsed, request, print_handlers)


def create_print_handlers(
    request: HttpRequest,
    handlers: Sequence[RequestHandler],
    sink: DiagnosticSink,
) -> PrintHandlers:
    """Rank suggestions once and close over the rendered texts."""
    suggestions = suggest_handlers(request, handlers)
    return PrintHandlers(
        sink,
        format_unhandled_request("warning", request, suggestions),
        format_unhandled_request("error", request, suggestions),
    )


async def _dispatch(
    strategy: Strategy, request: HttpRequest, print_handlers: PrintHandlers
) -> None:
    match strategy:
        case BypassStrategy():
            return
        case WarnStrategy():
            print_handlers.warning()
        case ErrorStrategy():
            print_handlers.error()
        case CustomStrategy(callback=callback):
            await _run_callback(callback, request, print_handlers)


async def _run_callback(
    callback: UnhandledRequestCallback,
    request: HttpRequest,
    print_handlers: PrintHandlers,
) -> None:
    result = callback(request, print_handlers)
    if inspect.isawaitable(result):
        await result
    # error() was called but the callback swallowed the failure.
    if print_handlers.raised is not None:
        raise print_handlers.raised
