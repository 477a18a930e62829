"""Shared fixtures and the suggestion conformance loader.

Suggestion cases live in tests/fixtures/*.yaml, one YAML document per case,
and are converted to mockroute types for parametrized testing.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
import yaml

from mockroute import HttpRequest, RestHandler, parse_handlers_config
from mockroute.testing import RecordingSink

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class SuggestionCase:
    """A single suggestion case from a conformance fixture."""

    source: str
    name: str
    request: HttpRequest
    handlers: tuple[RestHandler, ...]
    expect: list[str]


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_suggestion_cases() -> list[SuggestionCase]:
    """Load every suggestion case from the fixtures directory."""
    cases: list[SuggestionCase] = []
    for yaml_file in sorted(FIXTURES_DIR.glob("*.yaml")):
        cases.extend(_load_suggestion_file(yaml_file))
    return cases


def _load_suggestion_file(path: Path) -> list[SuggestionCase]:
    """Load a fixture file (may contain multiple documents)."""
    cases: list[SuggestionCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            cases.append(
                SuggestionCase(
                    source=path.name,
                    name=doc["name"],
                    request=_parse_request(doc["request"]),
                    handlers=parse_handlers_config(doc["handlers"]),
                    expect=[str(e) for e in doc["expect"]],
                )
            )
    return cases


def _parse_request(spec: dict[str, Any]) -> HttpRequest:
    """Parse a YAML request spec into an HttpRequest."""
    headers = {str(k): str(v) for k, v in spec.get("headers", {}).items()}
    return HttpRequest(
        method=str(spec.get("method", "GET")),
        url=str(spec["url"]),
        headers=headers,
    )


# ─── Shared fixtures ────────────────────────────────────────────────────────


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def request_api() -> HttpRequest:
    return HttpRequest("GET", "http://localhost/api")


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize any test that asks for ``suggestion_case``."""
    if "suggestion_case" in metafunc.fixturenames:
        cases = load_suggestion_cases()
        metafunc.parametrize(
            "suggestion_case", cases, ids=[f"{c.source}::{c.name}" for c in cases]
        )
