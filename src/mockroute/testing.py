"""Test utilities for mockroute.

RecordingSink captures diagnostics in memory so tests can assert on the
exact text and channel without touching logging configuration.

    >>> import asyncio
    >>> from mockroute import HttpRequest, on_unhandled_request
    >>> from mockroute.testing import RecordingSink
    >>> sink = RecordingSink()
    >>> asyncio.run(on_unhandled_request(HttpRequest("GET", "http://localhost/api"), [], "warn", sink=sink))
    >>> len(sink.warnings)
    1
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


@dataclass(slots=True)
class RecordingSink:
    """DiagnosticSink that keeps every message, in emission order."""

    records: list[tuple[Literal["warning", "error"], str]] = field(default_factory=list)

    def warning(self, msg: str, /) -> None:
        self.records.append(("warning", msg))

    def error(self, msg: str, /) -> None:
        self.records.append(("error", msg))

    @property
    def warnings(self) -> list[str]:
        return [msg for channel, msg in self.records if channel == "warning"]

    @property
    def errors(self) -> list[str]:
        return [msg for channel, msg in self.records if channel == "error"]

    def clear(self) -> None:
        self.records.clear()
