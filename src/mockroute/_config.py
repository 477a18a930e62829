"""Config types for unhandled-request resolution.

Two things are configured by the caller:

| Input                         | Parsed into            |
|-------------------------------|------------------------|
| "bypass" / "warn" / "error"   | built-in Strategy      |
| callable                      | CustomStrategy         |
| handler dict (JSON/YAML)      | RestHandler            |

Strategy tokens are case-sensitive. Anything else is a ConfigurationError,
raised before any diagnostic is written.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Literal

from mockroute._errors import ConfigParseError, ConfigurationError, MatcherError
from mockroute._handlers import RestHandler
from mockroute._matchers import ExactMatcher, RegexMatcher, ValueMatcher
from mockroute._messages import format_message

if TYPE_CHECKING:
    from mockroute._types import UnhandledRequestCallback

# ═══════════════════════════════════════════════════════════════════════════════
# Strategy types
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class BypassStrategy:
    """Let the request through silently."""


@dataclass(frozen=True, slots=True)
class WarnStrategy:
    """Print a warning, then let the request through."""


@dataclass(frozen=True, slots=True)
class ErrorStrategy:
    """Print an error and reject the request."""


@dataclass(frozen=True, slots=True)
class CustomStrategy:
    """Delegate to a caller-supplied callback.

    The callback receives the request and the PrintHandlers, and may be
    a coroutine function.
    """

    callback: UnhandledRequestCallback


type Strategy = BypassStrategy | WarnStrategy | ErrorStrategy | CustomStrategy

type StrategyToken = Literal["bypass", "warn", "error"]

_BUILTIN_STRATEGIES: Final[dict[str, Strategy]] = {
    "bypass": BypassStrategy(),
    "warn": WarnStrategy(),
    "error": ErrorStrategy(),
}

DEFAULT_STRATEGY: Final[StrategyToken] = "warn"


def parse_strategy(value: object) -> Strategy:
    """Parse an ``on_unhandled_request`` value into a Strategy.

    Accepts a strategy token, a callable, or an already parsed Strategy.

    Raises:
        ConfigurationError: If the value is none of those.
    """
    match value:
        case BypassStrategy() | WarnStrategy() | ErrorStrategy() | CustomStrategy():
            return value
        case str() if value in _BUILTIN_STRATEGIES:
            return _BUILTIN_STRATEGIES[value]
        case _ if callable(value):
            return CustomStrategy(callback=value)
    supported = ", ".join(f'"{token}"' for token in _BUILTIN_STRATEGIES)
    msg = format_message(
        f'Failed to react to an unhandled request: unknown strategy "{value}". '
        f"Please provide one of the supported strategies ({supported}) "
        'or a custom callback function as the value of the "onUnhandledRequest" option.'
    )
    raise ConfigurationError(msg)


# ═══════════════════════════════════════════════════════════════════════════════
# Handler parsing (dict → RestHandler)
# ═══════════════════════════════════════════════════════════════════════════════

# Value matcher variant names, same shape as { "Exact": "GET" } / { "Regex": "^GE" }
_VALUE_MATCH_VARIANTS: Final[dict[str, Callable[[str], ValueMatcher]]] = {
    "Exact": ExactMatcher,
    "Regex": RegexMatcher,
}


def parse_handlers_config(data: list[dict[str, Any]]) -> tuple[RestHandler, ...]:
    """Parse a list of handler dicts, preserving registration order.

    Raises:
        ConfigParseError: If the list or any entry is malformed.
    """
    if not isinstance(data, list):
        msg = f"handlers must be a list, got {type(data).__name__}"
        raise ConfigParseError(msg)
    return tuple(parse_handler_config(entry) for entry in data)


def parse_handler_config(data: dict[str, Any]) -> RestHandler:
    """Parse one handler dict into a RestHandler.

    Expected format::

        {"method": "GET", "path": "/api"}
        {"method": {"Regex": "^GE"}, "path": {"Exact": "https://api.example.com/user"}}

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"handler must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    for required in ("method", "path"):
        if required not in data:
            msg = f"handler missing required field {required!r}"
            raise ConfigParseError(msg)

    method = _parse_value_match(data["method"], "method")
    path = _parse_value_match(data["path"], "path")
    return RestHandler(method=method, path=path)


def _parse_value_match(data: str | dict[str, Any], field_name: str) -> ValueMatcher:
    """Parse a method or path value: a bare string or a one-key variant dict."""
    if isinstance(data, str):
        return ExactMatcher(data)
    if not isinstance(data, dict):
        msg = f"{field_name} must be a string or a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    if len(data) != 1:
        expected = sorted(_VALUE_MATCH_VARIANTS)
        msg = f"{field_name} must contain exactly one of {expected}, got keys: {sorted(data)}"
        raise ConfigParseError(msg)

    variant, value = next(iter(data.items()))
    factory = _VALUE_MATCH_VARIANTS.get(variant)
    if factory is None:
        expected = sorted(_VALUE_MATCH_VARIANTS)
        msg = f"{field_name} must contain one of {expected}, got keys: {sorted(data)}"
        raise ConfigParseError(msg)
    if not isinstance(value, str):
        msg = f"{field_name} {variant} value must be a string, got {type(value).__name__}"
        raise ConfigParseError(msg)

    try:
        return factory(value)
    except MatcherError as e:
        msg = f"invalid {field_name}: {e}"
        raise ConfigParseError(msg) from e
