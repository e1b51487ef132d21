"""ASGI handler — turns a resolution outcome into a response.

The only component that touches raw ASGI scopes on the request side.
Builds a typed Request, asks the resolver what the path denotes, and
either redirects, forwards to the document view, or answers 404.
"""

import inspect
import logging
from collections.abc import Callable
from typing import Any

import anyio

from seoroute._internal.asgi import Receive, Scope, Send, invoke
from seoroute.errors import HTTPError, HTTPNotFound, InvalidOriginError
from seoroute.http.request import Request
from seoroute.http.response import Response
from seoroute.routing.outcome import NotFound, RedirectToCanonical, ServeById, ServeDirect
from seoroute.routing.resolver import Resolver
from seoroute.server.errors import handle_http_error, handle_internal_error
from seoroute.server.negotiation import negotiate
from seoroute.server.sender import send_response
from seoroute.store import DocumentStore

logger = logging.getLogger("seoroute.server")


def default_view(document_id: str, seo_key: str | None = None) -> dict[str, str]:
    """Describe the matched document as JSON when no view is registered."""
    if seo_key is None:
        return {"document_id": document_id}
    return {"document_id": document_id, "seo_key": seo_key}


async def handle_request(
    scope: Scope,
    receive: Receive,  # noqa: ARG001 — GET-only pipeline, body is never read
    send: Send,
    *,
    resolver: Resolver,
    view: Callable[..., Any],
    store: DocumentStore | None,
    error_handlers: dict[int | type, Callable[..., Any]],
    redirect_status: int = 301,
    debug: bool = False,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        try:
            outcome = resolver.resolve(
                request.path,
                request.origin,
                request.query.raw,
                raw_path=request.raw_path,
            )
        except InvalidOriginError as exc:
            raise HTTPError(status=400, detail=str(exc)) from exc

        match outcome:
            case ServeDirect(document_id=document_id, key=key):
                response = await _invoke_view(view, request, document_id, key, store)
            case ServeById(document_id=document_id):
                response = await _invoke_view(view, request, document_id, None, store)
            case RedirectToCanonical(url=url, expired=expired):
                logger.debug(
                    "%d %s -> %s%s",
                    redirect_status,
                    request.path,
                    url,
                    " (expired alias)" if expired else "",
                )
                response = Response(body="").with_status(redirect_status).with_header("Location", url)
            case NotFound(path=path):
                raise HTTPNotFound(f"No alias or fallback route matches {path!r}")

    except HTTPError as exc:
        response = await handle_http_error(exc, request, error_handlers, debug)
    except Exception as exc:
        response = await handle_internal_error(exc, request, error_handlers, debug)

    await send_response(response, send)


async def _invoke_view(
    view: Callable[..., Any],
    request: Request,
    document_id: str,
    seo_key: str | None,
    store: DocumentStore | None,
) -> Response:
    """Call the document view with the arguments it asks for."""
    kwargs: dict[str, Any] = {}
    for name, param in inspect.signature(view, eval_str=True).parameters.items():
        if name == "request" or param.annotation is Request:
            kwargs[name] = request
        elif name == "document_id":
            kwargs[name] = document_id
        elif name == "seo_key":
            kwargs[name] = seo_key
        elif name == "document":
            kwargs[name] = await _load_document(store, document_id)

    result = await invoke(view, **kwargs)
    return negotiate(result)


async def _load_document(store: DocumentStore | None, document_id: str) -> Any:
    if store is None:
        msg = "The document view asks for 'document' but the app has no document store."
        raise RuntimeError(msg)
    document = await anyio.to_thread.run_sync(store.get, document_id)
    if document is None:
        raise HTTPNotFound(f"Document {document_id!r} not found")
    return document
