"""ASGI plumbing shared by the app, the handler and the test client.

Raw ASGI callables stop here; past the handler everything works with
``Request`` and ``Response``. User callables (the document view, error
handlers, lifecycle hooks) may be plain or ``async`` functions and all
go through ``invoke``.
"""

import inspect
from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]

# Parameters injected by name: request, document_id, seo_key, document
DocumentView: TypeAlias = Callable[..., Any]
# Zero, one (request) or two (request, exc) positional parameters
ErrorHandler: TypeAlias = Callable[..., Any]


async def invoke(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await its result when it returns an awaitable."""
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        return await result
    return result
