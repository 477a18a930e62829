"""mockroute — unhandled-request resolution for HTTP request mocking.

All public types are exported from this module for flat imports:

    from mockroute import HttpRequest, RestHandler, on_unhandled_request
"""

__version__ = "0.1.0"

# Config types, see mockroute._config for details
from mockroute._config import (
    DEFAULT_STRATEGY,
    BypassStrategy,
    CustomStrategy,
    ErrorStrategy,
    Strategy,
    StrategyToken,
    WarnStrategy,
    parse_handler_config,
    parse_handlers_config,
    parse_strategy,
)

# Handler descriptors
from mockroute._descriptor import (
    DeclaredPattern,
    DeclaredValue,
    HandlerDescriptor,
    declared_value,
    describe_handler,
)

# Dispatch
from mockroute._dispatch import find_handler, handle_request

# Errors
from mockroute._errors import (
    ConfigParseError,
    ConfigurationError,
    MatcherError,
    MockrouteError,
    UnhandledRequestError,
)

# Handlers and matching
from mockroute._handlers import RestHandler
from mockroute._matchers import ExactMatcher, RegexMatcher, ValueMatcher, as_value_matcher

# Messages
from mockroute._messages import (
    DOCS_URL,
    PRODUCT_TAG,
    MessageKind,
    format_message,
    format_unhandled_request,
)
from mockroute._predicate import (
    And,
    MethodInput,
    PathInput,
    Predicate,
    SinglePredicate,
    UrlInput,
    and_predicate,
)
from mockroute._request import HttpRequest, url_origin

# Resolver
from mockroute._resolver import (
    ERROR_STRATEGY_MESSAGE,
    PrintHandlers,
    create_print_handlers,
    on_unhandled_request,
)

# Suggestions
from mockroute._suggestions import (
    MAX_SUGGESTIONS,
    Candidate,
    Suggestion,
    rank_candidates,
    suggest_handlers,
)
from mockroute._types import DiagnosticSink, RequestHandler, UnhandledRequestCallback

__all__ = [
    # Protocols
    "DiagnosticSink",
    "RequestHandler",
    "UnhandledRequestCallback",
    # Request
    "HttpRequest",
    "url_origin",
    # Value matchers
    "ExactMatcher",
    "RegexMatcher",
    "ValueMatcher",
    "as_value_matcher",
    # Predicates
    "MethodInput",
    "PathInput",
    "UrlInput",
    "SinglePredicate",
    "And",
    "Predicate",
    "and_predicate",
    # Handlers
    "RestHandler",
    "DeclaredPattern",
    "DeclaredValue",
    "HandlerDescriptor",
    "declared_value",
    "describe_handler",
    "find_handler",
    "handle_request",
    # Suggestions
    "Candidate",
    "Suggestion",
    "MAX_SUGGESTIONS",
    "rank_candidates",
    "suggest_handlers",
    # Messages
    "MessageKind",
    "PRODUCT_TAG",
    "DOCS_URL",
    "format_message",
    "format_unhandled_request",
    # Strategies
    "Strategy",
    "StrategyToken",
    "BypassStrategy",
    "WarnStrategy",
    "ErrorStrategy",
    "CustomStrategy",
    "DEFAULT_STRATEGY",
    "parse_strategy",
    "parse_handler_config",
    "parse_handlers_config",
    # Resolver
    "PrintHandlers",
    "ERROR_STRATEGY_MESSAGE",
    "create_print_handlers",
    "on_unhandled_request",
    # Errors
    "MockrouteError",
    "MatcherError",
    "ConfigParseError",
    "ConfigurationError",
    "UnhandledRequestError",
]
