"""Request dispatch — first-match-wins over registered handlers.

Handlers are consulted in registration order and the first one that matches
wins; later handlers are never evaluated. When nothing matches, the
unhandled-request strategy decides whether the request may proceed.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from mockroute._config import DEFAULT_STRATEGY
from mockroute._resolver import on_unhandled_request

if TYPE_CHECKING:
    from mockroute._handlers import RestHandler
    from mockroute._request import HttpRequest
    from mockroute._types import DiagnosticSink

logger = logging.getLogger(__name__)


def find_handler(
    request: HttpRequest, handlers: Sequence[RestHandler]
) -> RestHandler | None:
    """Return the first handler matching ``request``, or None."""
    for handler in handlers:
        if handler.matches(request):
            return handler
    return None


async def handle_request(
    request: HttpRequest,
    handlers: Sequence[RestHandler],
    on_unhandled: object = DEFAULT_STRATEGY,
    *,
    sink: DiagnosticSink | None = None,
) -> RestHandler | None:
    """Pick the handler for ``request``.

    Returns the matching handler, or None when no handler matched and the
    unhandled-request strategy let the request bypass.

    Raises:
        ConfigurationError: If ``on_unhandled`` is not a supported strategy.
        UnhandledRequestError: If the strategy rejects the request.
    """
    handler = find_handler(request, handlers)
    if handler is not None:
        logger.debug("%s %s matched %s", request.method, request.url, handler)
        return handler
    await on_unhandled_request(request, handlers, on_unhandled, sink=sink)
    return None
