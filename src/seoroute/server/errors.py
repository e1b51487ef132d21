"""Error responses for the request pipeline.

``HTTPError`` (404 for unresolvable paths, 400 for a redirect without a
usable origin) and unexpected exceptions become responses here, through
an ``@app.error()`` handler when one is registered, else as plain text.
"""

import inspect
import logging
from typing import Any

from seoroute._internal.asgi import ErrorHandler, invoke
from seoroute.errors import HTTPError
from seoroute.http.request import Request
from seoroute.http.response import Response
from seoroute.server.negotiation import negotiate

logger = logging.getLogger("seoroute.server")

_PLAIN = "text/plain; charset=utf-8"


def find_error_handler(
    exc: Exception,
    error_handlers: dict[int | type, ErrorHandler],
    status: int,
) -> ErrorHandler | None:
    """Most specific handler for *exc*: its class hierarchy first, then *status*.

    A handler registered for ``HTTPError`` therefore also receives
    ``HTTPNotFound``.
    """
    for cls in type(exc).__mro__:
        handler = error_handlers.get(cls)
        if handler is not None:
            return handler
        if cls is Exception:
            break
    return error_handlers.get(status)


async def call_error_handler(handler: ErrorHandler, request: Request, exc: Exception) -> Response:
    """Call *handler* with as many of ``(request, exc)`` as it accepts."""
    arity = len(inspect.signature(handler).parameters)
    args: tuple[Any, ...] = (request, exc)[: min(arity, 2)]
    return negotiate(await invoke(handler, *args))


async def handle_http_error(
    exc: HTTPError,
    request: Request,
    error_handlers: dict[int | type, ErrorHandler],
    debug: bool,
) -> Response:
    """Map an HTTPError to a Response."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    handler = find_error_handler(exc, error_handlers, exc.status)
    if handler is not None:
        response = await call_error_handler(handler, request, exc)
        # A handler that returns a bare body keeps the error status
        return response.with_status(exc.status) if response.status == 200 else response

    if debug and exc.detail:
        body = str(exc)
    else:
        body = exc.detail or f"Error {exc.status}"
    return Response(body=body, status=exc.status, content_type=_PLAIN, headers=exc.headers)


async def handle_internal_error(
    exc: Exception,
    request: Request,
    error_handlers: dict[int | type, ErrorHandler],
    debug: bool,
) -> Response:
    """Log *exc* with its traceback and answer 500."""
    logger.exception("500 %s %s", request.method, request.path)

    handler = find_error_handler(exc, error_handlers, 500)
    if handler is not None:
        return await call_error_handler(handler, request, exc)

    body = f"Internal Server Error: {type(exc).__name__}: {exc}" if debug else "Internal Server Error"
    return Response(body=body, status=500, content_type=_PLAIN)
