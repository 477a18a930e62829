"""Tests for the handler descriptor projection."""

import re
from dataclasses import dataclass

from mockroute import (
    DeclaredPattern,
    ExactMatcher,
    HttpRequest,
    RegexMatcher,
    RestHandler,
    declared_value,
    describe_handler,
)


@dataclass(frozen=True)
class BareHandler:
    """Any object with method and path attributes is a handler."""

    method: object
    path: object


class TestDescribeHandler:
    def test_relative_path_inherits_request_origin(self) -> None:
        request = HttpRequest("GET", "http://localhost:3000/api")
        d = describe_handler(RestHandler("GET", "/api"), request)
        assert d.origin == "http://localhost:3000"
        assert d.method == ExactMatcher("GET")
        assert d.path == ExactMatcher("/api")
        assert d.pathname == "/api"

    def test_absolute_path_has_own_origin(self) -> None:
        request = HttpRequest("GET", "http://localhost/api")
        d = describe_handler(RestHandler("GET", "https://api.example.com/v1/users"), request)
        assert d.origin == "https://api.example.com"
        assert d.pathname == "/v1/users"

    def test_absolute_path_without_pathname(self) -> None:
        request = HttpRequest("GET", "http://localhost/api")
        d = describe_handler(RestHandler("GET", "https://api.github.com"), request)
        assert d.pathname == "/"

    def test_pattern_path_inherits_request_origin(self) -> None:
        request = HttpRequest("GET", "http://localhost/api")
        d = describe_handler(RestHandler("GET", RegexMatcher("^https://other")), request)
        assert d.origin == "http://localhost"
        assert d.pathname is None

    def test_duck_typed_handler(self) -> None:
        request = HttpRequest("POST", "http://localhost/login")
        d = describe_handler(BareHandler("POST", "/login"), request)
        assert d.method == ExactMatcher("POST")
        assert d.origin == "http://localhost"

    def test_pattern_path_is_not_compiled(self) -> None:
        # RE2 rejects lookahead; describing must still succeed.
        request = HttpRequest("GET", "http://localhost/api")
        pattern = re.compile(r"/api(?!/v2)")
        d = describe_handler(BareHandler("GET", pattern), request)
        assert d.path == DeclaredPattern(pattern)
        assert d.pathname is None

    def test_regex_matcher_is_a_pattern(self) -> None:
        request = HttpRequest("GET", "http://localhost/api")
        matcher = RegexMatcher("^GE")
        d = describe_handler(RestHandler(matcher, "/api"), request)
        assert d.method == DeclaredPattern(matcher)

    def test_unparseable_absolute_origin_is_none(self) -> None:
        request = HttpRequest("GET", "http://localhost/api")
        d = describe_handler(BareHandler("GET", "http://localhost:abc/x"), request)
        assert d.origin is None
        assert d.pathname == "/x"


class TestDeclaredValue:
    def test_string_is_literal(self) -> None:
        assert declared_value("/api") == ExactMatcher("/api")

    def test_exact_matcher_passes_through(self) -> None:
        m = ExactMatcher("GET")
        assert declared_value(m) is m

    def test_other_objects_are_patterns(self) -> None:
        assert declared_value(42) == DeclaredPattern(42)
