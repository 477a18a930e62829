"""Tests for strategy parsing and handler config parsing (mockroute._config)."""

import re

import pytest

from mockroute import (
    DEFAULT_STRATEGY,
    BypassStrategy,
    ConfigParseError,
    ConfigurationError,
    CustomStrategy,
    ErrorStrategy,
    ExactMatcher,
    RegexMatcher,
    RestHandler,
    WarnStrategy,
    parse_handler_config,
    parse_handlers_config,
    parse_strategy,
)


def _unknown_strategy_message(value: str) -> str:
    return (
        f'[mockroute] Failed to react to an unhandled request: unknown strategy "{value}". '
        'Please provide one of the supported strategies ("bypass", "warn", "error") '
        'or a custom callback function as the value of the "onUnhandledRequest" option.'
    )


class TestParseStrategy:
    """Tests for parse_strategy()."""

    def test_tokens(self) -> None:
        assert parse_strategy("bypass") == BypassStrategy()
        assert parse_strategy("warn") == WarnStrategy()
        assert parse_strategy("error") == ErrorStrategy()

    def test_default_is_warn(self) -> None:
        assert parse_strategy(DEFAULT_STRATEGY) == WarnStrategy()

    def test_callable(self) -> None:
        def callback(request, print_handlers) -> None:  # noqa: ANN001
            pass

        assert parse_strategy(callback) == CustomStrategy(callback)

    def test_parsed_passthrough(self) -> None:
        strategy = ErrorStrategy()
        assert parse_strategy(strategy) is strategy

    def test_unknown_token(self) -> None:
        with pytest.raises(
            ConfigurationError,
            match=re.escape(_unknown_strategy_message("invalid-strategy")),
        ):
            parse_strategy("invalid-strategy")

    @pytest.mark.parametrize("value", ["Warn", "ERROR", " bypass", ""])
    def test_tokens_are_case_sensitive(self, value: str) -> None:
        with pytest.raises(ConfigurationError, match=re.escape(f'unknown strategy "{value}"')):
            parse_strategy(value)

    @pytest.mark.parametrize("value", [None, 42, ["warn"]])
    def test_non_string_values(self, value: object) -> None:
        with pytest.raises(ConfigurationError, match="unknown strategy"):
            parse_strategy(value)


class TestParseHandlerConfig:
    """Tests for parse_handler_config() / parse_handlers_config()."""

    def test_bare_strings(self) -> None:
        handler = parse_handler_config({"method": "GET", "path": "/api"})
        assert handler == RestHandler("GET", "/api")
        assert handler.method == ExactMatcher("GET")

    def test_variants(self) -> None:
        handler = parse_handler_config(
            {"method": {"Regex": "^GE"}, "path": {"Exact": "https://api.example.com/user"}}
        )
        assert handler.method == RegexMatcher("^GE")
        assert handler.path == ExactMatcher("https://api.example.com/user")

    def test_list_keeps_order(self) -> None:
        handlers = parse_handlers_config(
            [{"method": "GET", "path": "/b"}, {"method": "GET", "path": "/a"}]
        )
        assert [str(h.path) for h in handlers] == ["/b", "/a"]

    def test_not_a_list(self) -> None:
        with pytest.raises(ConfigParseError, match="handlers must be a list"):
            parse_handlers_config({"method": "GET"})  # type: ignore[arg-type]

    def test_not_a_dict(self) -> None:
        with pytest.raises(ConfigParseError, match="handler must be a dict"):
            parse_handler_config("GET /api")  # type: ignore[arg-type]

    @pytest.mark.parametrize("missing", ["method", "path"])
    def test_missing_field(self, missing: str) -> None:
        data = {"method": "GET", "path": "/api"}
        del data[missing]
        with pytest.raises(ConfigParseError, match=f"missing required field '{missing}'"):
            parse_handler_config(data)

    def test_unknown_variant(self) -> None:
        with pytest.raises(ConfigParseError, match="path must contain one of"):
            parse_handler_config({"method": "GET", "path": {"Prefix": "/api"}})

    def test_two_variants(self) -> None:
        with pytest.raises(ConfigParseError, match="exactly one of"):
            parse_handler_config({"method": {"Exact": "GET", "Regex": "G"}, "path": "/"})

    def test_non_string_variant_value(self) -> None:
        with pytest.raises(ConfigParseError, match="method Exact value must be a string"):
            parse_handler_config({"method": {"Exact": 1}, "path": "/"})

    def test_wrong_value_type(self) -> None:
        with pytest.raises(ConfigParseError, match="path must be a string or a dict"):
            parse_handler_config({"method": "GET", "path": 3})

    def test_invalid_regex(self) -> None:
        with pytest.raises(ConfigParseError, match="invalid path"):
            parse_handler_config({"method": "GET", "path": {"Regex": "(unclosed"}})
