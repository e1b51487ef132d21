"""ASGI response sending — translates Response objects to ASGI messages."""

from urllib.parse import quote

from seoroute._internal.asgi import Send
from seoroute.http.response import Response

# Characters left alone when percent-encoding a Location value
_URL_SAFE = ":/?#[]@!$&'()*+,;=%~"


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def encode_header_value(name: str, value: str) -> bytes:
    """Encode a header value for the wire.

    ``Location`` values may hold non-ASCII alias paths (``/Product/Büz/``);
    those are percent-encoded as UTF-8. Other headers must be latin-1.
    """
    if name.lower() == "location":
        return quote(value, safe=_URL_SAFE).encode("ascii")
    return value.encode("latin-1")


async def send_response(response: Response, send: Send) -> None:
    """Translate a Response into ASGI send() calls."""
    raw_headers: list[tuple[bytes, bytes]] = [
        (b"content-type", response.content_type.encode("latin-1")),
    ]
    for name, value in response.headers:
        raw_headers.append((name.lower().encode("latin-1"), encode_header_value(name, value)))

    body = response.body_bytes if _body_allowed(response.status) else b""

    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )
