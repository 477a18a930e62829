"""Exception hierarchy for mockroute.

Every error raised by the package derives from MockrouteError, so callers
can catch package failures without catching exceptions raised by their own
unhandled-request callbacks (those propagate unwrapped).
"""


class MockrouteError(Exception):
    """Base class for all mockroute errors."""


class MatcherError(MockrouteError):
    """A value matcher could not be constructed."""


class ConfigParseError(MockrouteError):
    """Error parsing a config dict into handler types."""


class ConfigurationError(MockrouteError):
    """The unhandled-request strategy is not a supported value."""


class UnhandledRequestError(MockrouteError):
    """The active strategy forbids an unhandled request from bypassing.

    Always raised after the error diagnostic has been emitted.
    """
