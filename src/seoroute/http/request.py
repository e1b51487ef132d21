"""The request as the resolver needs it.

Parsed once from the ASGI scope: the decoded path for alias lookup, the
raw path for the fallback route, and scheme plus host for redirect URLs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from seoroute.http.headers import Headers
from seoroute.http.query import QueryParams
from seoroute.routing.fallback import PATH_SAFE

_DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is percent-decoded (as ASGI delivers it). ``raw_path`` is the
    path as it came over the wire, so ``/test/a%2Fb/`` keeps its quoted
    slash. ``query.raw`` keeps the original query string for redirects.
    """

    method: str
    path: str
    raw_path: str
    scheme: str
    headers: Headers
    query: QueryParams
    server: tuple[str, int] | None

    @property
    def host(self) -> str | None:
        """Host (with port when non-default) from the Host header or server address."""
        host = self.headers.get("host")
        if host:
            return host
        if self.server is None:
            return None
        name, port = self.server
        if port is None or _DEFAULT_PORTS.get(self.scheme) == port:
            return name
        return f"{name}:{port}"

    @property
    def origin(self) -> str | None:
        """``scheme://host`` of this request, or ``None`` if the host is unknown."""
        host = self.host
        if not self.scheme or not host:
            return None
        return f"{self.scheme}://{host}"

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope.

        ``raw_path`` is optional in ASGI; without it the decoded path is
        re-quoted, which loses nothing but a quoted ``/``.
        """
        path = scope["path"]
        raw = scope.get("raw_path")
        if raw:
            raw_path = raw.decode("latin-1").partition("?")[0]
        else:
            raw_path = quote(path, safe=PATH_SAFE)
        server = scope.get("server")
        return cls(
            method=scope["method"],
            path=path,
            raw_path=raw_path,
            scheme=scope.get("scheme", "http"),
            headers=Headers(scope.get("headers", ())),
            query=QueryParams(scope.get("query_string", b"")),
            server=tuple(server) if server else None,
        )
