"""HttpRequest — the intercepted request handed to mockroute.

Holds method, absolute URL and headers (case-insensitive). Origin, pathname
and query parameters are derived once at construction.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from urllib.parse import parse_qsl, urljoin, urlsplit

_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443}


def url_origin(url: str) -> str | None:
    """Return scheme://host[:port] for an absolute URL, None for relative ones.

    Scheme and host are lowercased and default ports are dropped, so
    ``HTTP://Example.com:80/a`` and ``http://example.com/b`` share an origin.
    """
    parts = urlsplit(url)
    if not parts.scheme or not parts.hostname:
        return None
    scheme = parts.scheme.lower()
    host = parts.hostname
    if ":" in host:
        host = f"[{host}]"
    port = parts.port
    if port is None or _DEFAULT_PORTS.get(scheme) == port:
        return f"{scheme}://{host}"
    return f"{scheme}://{host}:{port}"


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """An outgoing request with an absolute URL.

    A relative ``url`` is resolved against ``base``. The result must be
    absolute, otherwise construction fails.

    Headers and query parameters are copied into read-only mappings at
    construction, so later changes to the caller's dict are not seen.
    """

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    base: str | None = field(default=None, repr=False, compare=False)

    # Computed fields, parsed from url
    _origin: str = field(init=False, repr=False, compare=False)
    _path: str = field(init=False, repr=False, compare=False)
    _query_params: Mapping[str, str] = field(init=False, repr=False, compare=False)
    _lower_headers: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        url = urljoin(self.base, self.url) if self.base is not None else self.url
        origin = url_origin(url)
        if origin is None:
            msg = f"request URL must be absolute, got {url!r}"
            raise ValueError(msg)
        parts = urlsplit(url)
        object.__setattr__(self, "url", url)
        object.__setattr__(self, "_origin", origin)
        object.__setattr__(self, "_path", parts.path or "/")
        query = dict(parse_qsl(parts.query, keep_blank_values=True))
        object.__setattr__(self, "_query_params", MappingProxyType(query))
        headers = dict(self.headers)
        object.__setattr__(self, "headers", MappingProxyType(headers))
        object.__setattr__(
            self,
            "_lower_headers",
            MappingProxyType({k.lower(): v for k, v in headers.items()}),
        )

    @property
    def origin(self) -> str:
        """Scheme, host and non-default port."""
        return self._origin

    @property
    def path(self) -> str:
        """Pathname without query string or fragment."""
        return self._path

    @property
    def clean_url(self) -> str:
        """Origin plus pathname, without query string or fragment."""
        return self._origin + self._path

    @property
    def query_params(self) -> Mapping[str, str]:
        """Parsed query parameters, read-only."""
        return self._query_params

    def header(self, name: str) -> str | None:
        """Get a header value by name (case-insensitive)."""
        return self._lower_headers.get(name.lower())

    def query_param(self, name: str) -> str | None:
        """Get a query parameter by name."""
        return self._query_params.get(name)
