"""Diagnostic text for unhandled requests.

The wording and bullet layout are a public contract: callers assert on the
exact strings, so every change here is a breaking change.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from mockroute._request import HttpRequest
    from mockroute._suggestions import Suggestion

PRODUCT_TAG = "[mockroute]"
DOCS_URL = "https://mockroute.readthedocs.io/en/latest/getting-started.html"

type MessageKind = Literal["warning", "error"]

_KIND_LABELS: dict[MessageKind, str] = {"warning": "Warning", "error": "Error"}


def format_message(text: str) -> str:
    """Prefix ``text`` with the product tag."""
    return f"{PRODUCT_TAG} {text}"


def format_bullet(text: str) -> str:
    return f"  • {text}"


def format_unhandled_request(
    kind: MessageKind,
    request: HttpRequest,
    suggestions: Sequence[Suggestion] = (),
) -> str:
    """Render the warning or error text for an unmatched request.

    The suggestion block is omitted entirely when ``suggestions`` is empty.
    """
    label = _KIND_LABELS[kind]
    lines = [
        format_message(f"{label}: captured a request without a matching request handler:"),
        "",
        format_bullet(f"{request.method} {request.url}"),
    ]
    if suggestions:
        lines += [
            "",
            "Did you mean to request one of the following resources instead?",
            "",
            *(format_bullet(str(s)) for s in suggestions),
        ]
    lines += [
        "",
        "If you still wish to intercept this unhandled request, "
        "please create a request handler for it.",
        f"Read more: {DOCS_URL}",
    ]
    return "\n".join(lines)
