"""Async test client for seoroute applications.

Uses the same Response type as production. Requests go through the
ASGI interface directly — no HTTP involved.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote, unquote, urlsplit

from seoroute.app import App
from seoroute.http.response import Response
from seoroute.routing.fallback import PATH_SAFE

_DEFAULT_PORTS = {"http": 80, "https": 443}


class TestClient:
    __test__ = False  # Tell pytest this is not a test class
    """Async test client for seoroute applications.

    Relative paths are sent to ``base_url``; absolute URLs carry their
    own scheme and host, so ``client.get("http://localhost/Product/baz/")``
    behaves like a browser hitting that URL.

    Usage::

        async with TestClient(app, base_url="http://localhost") as client:
            response = await client.get("/Product/Baz/")
            assert response.status == 200
    """

    __slots__ = ("app", "base_url")

    def __init__(self, app: App, base_url: str = "http://testserver") -> None:
        self.app = app
        self.base_url = base_url.rstrip("/")

    async def __aenter__(self) -> TestClient:
        await self.app.startup()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.app.shutdown()

    async def get(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> Response:
        """Send a GET request."""
        return await self.request("GET", url, headers=headers)

    async def head(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> Response:
        """Send a HEAD request."""
        return await self.request("HEAD", url, headers=headers)

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> Response:
        """Send an arbitrary request through the ASGI app."""
        target = urlsplit(url if urlsplit(url).scheme else f"{self.base_url}{url}")
        scheme = target.scheme or "http"
        host = target.hostname or "testserver"
        port = target.port or _DEFAULT_PORTS.get(scheme, 80)
        # Browsers send non-ASCII as UTF-8 escapes and leave existing escapes alone
        raw_path = quote(target.path or "/", safe=PATH_SAFE + "%")
        path = unquote(raw_path)

        # Host header first so explicit headers can override it
        merged = {"host": target.netloc, **(headers or {})}
        raw_headers: list[tuple[bytes, bytes]] = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in merged.items()
        ]

        scope: dict[str, Any] = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method.upper(),
            "scheme": scheme,
            "path": path,
            "raw_path": raw_path.encode("ascii"),
            "query_string": target.query.encode("latin-1"),
            "root_path": "",
            "headers": raw_headers,
            "server": (host, port),
            "client": ("127.0.0.1", 0),
        }

        request_body = body or b""
        body_sent = False

        async def receive() -> dict[str, Any]:
            nonlocal body_sent
            if not body_sent:
                body_sent = True
                return {"type": "http.request", "body": request_body, "more_body": False}
            return {"type": "http.disconnect"}

        response_status = 200
        response_headers: list[tuple[bytes, bytes]] = []
        response_body_parts: list[bytes] = []

        async def send(message: dict[str, Any]) -> None:
            nonlocal response_status, response_headers
            if message["type"] == "http.response.start":
                response_status = message["status"]
                response_headers = list(message.get("headers", []))
            elif message["type"] == "http.response.body":
                response_body_parts.append(message.get("body", b""))

        await self.app(scope, receive, send)

        content_type = "text/html; charset=utf-8"
        extra_headers: list[tuple[str, str]] = []
        for name_b, value_b in response_headers:
            name_str = name_b.decode("latin-1")
            value_str = value_b.decode("latin-1")
            if name_str == "content-type":
                content_type = value_str
            elif name_str != "content-length":
                extra_headers.append((name_str, value_str))

        return Response(
            body=b"".join(response_body_parts),
            status=response_status,
            content_type=content_type,
            headers=tuple(extra_headers),
        )
