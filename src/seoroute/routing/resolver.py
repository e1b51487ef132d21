"""Inbound resolution — request path to outcome.

Decision order, first match wins:

1. Alias lookup by folded path
   - live, exact casing   -> ``ServeDirect``
   - live, other casing   -> ``RedirectToCanonical``
   - expired              -> ``RedirectToCanonical`` (to the live alias)
2. Fallback route match   -> ``ServeById``
3. Otherwise              -> ``NotFound``

Pure: no I/O, no locks. The resolver reads one index snapshot per call.
"""

from urllib.parse import quote, unquote, urlsplit

from seoroute.aliases.index import AliasIndex, strip_path
from seoroute.aliases.snapshot import IndexSnapshot
from seoroute.errors import InvalidOriginError
from seoroute.routing.fallback import PATH_SAFE, FallbackRoute
from seoroute.routing.outcome import (
    NotFound,
    RedirectToCanonical,
    ResolutionOutcome,
    ServeById,
    ServeDirect,
)


def normalize_origin(origin: str | None) -> str:
    """Reduce *origin* to ``scheme://host[:port]``.

    Raises ``InvalidOriginError`` if the scheme or host is missing.
    """
    if not origin:
        msg = "Cannot build an absolute redirect URL without a request origin."
        raise InvalidOriginError(msg)
    parts = urlsplit(origin)
    if not parts.scheme or not parts.netloc:
        msg = f"Request origin {origin!r} must include a scheme and host (e.g. 'http://localhost')."
        raise InvalidOriginError(msg)
    return f"{parts.scheme}://{parts.netloc}"


def canonical_url(origin: str | None, canonical_path: str, query: str = "") -> str:
    """Absolute URL for *canonical_path* on *origin*, keeping *query* as-is."""
    url = f"{normalize_origin(origin)}/{strip_path(canonical_path)}"
    if query:
        return f"{url}?{query}"
    return url


def resolve(
    index: AliasIndex,
    path: str,
    origin: str | None,
    *,
    fallback: FallbackRoute,
    query: str = "",
    raw_path: str | None = None,
) -> ResolutionOutcome:
    """Decide what to do with a request for *path*.

    Args:
        index: The alias index snapshot to consult.
        path: Percent-decoded request path (``/Product/Baz/``).
        origin: ``scheme://host`` of the request; only needed when the
            outcome is a redirect.
        fallback: The identifier-based route.
        query: Raw query string of the request, without ``?``.
        raw_path: The path as received, still percent-encoded. The
            fallback route matches against it so a quoted ``/`` inside
            an id stays part of the id. Derived from *path* when omitted.

    Raises:
        InvalidOriginError: A redirect is due but *origin* is unusable.
    """
    entry = index.lookup(path)
    if entry is not None:
        if not entry.is_expired and strip_path(path) == entry.canonical_path:
            return ServeDirect(document_id=entry.document_id, key=entry.key)
        return RedirectToCanonical(
            url=canonical_url(origin, entry.canonical_path, query),
            document_id=entry.document_id,
            key=entry.key,
            expired=entry.is_expired,
        )

    if raw_path is None:
        raw_path = quote(path, safe=PATH_SAFE)
    document_id = fallback.match(raw_path)
    if document_id is not None:
        return ServeById(document_id=document_id)

    return NotFound(path=path)


class Resolver:
    """Resolves request paths against the index currently in service.

    Usage::

        resolver = Resolver(snapshot, FallbackRoute("/test/{id}/"))
        outcome = resolver.resolve("/Product/baz/", "http://localhost")
        outcome = resolver.resolve_url("http://localhost/Product/baz/")
    """

    __slots__ = ("fallback", "snapshot")

    def __init__(self, snapshot: IndexSnapshot, fallback: FallbackRoute | None = None) -> None:
        self.snapshot = snapshot
        self.fallback = fallback or FallbackRoute()

    def resolve(
        self,
        path: str,
        origin: str | None,
        query: str = "",
        *,
        raw_path: str | None = None,
    ) -> ResolutionOutcome:
        """Resolve a decoded *path* (see ``resolve``)."""
        return resolve(
            self.snapshot.current,
            path,
            origin,
            fallback=self.fallback,
            query=query,
            raw_path=raw_path,
        )

    def resolve_url(self, url: str, default_origin: str | None = None) -> ResolutionOutcome:
        """Resolve an absolute URL, or a relative one against *default_origin*.

        Aliases are looked up by the percent-decoded path, so
        ``http://localhost/Product/B%C3%A4r/?x=1`` and
        ``/Product/Bär/?x=1`` resolve alike. The fallback route sees the
        path as written, so ``/test/a%2Fb/`` yields the id ``a/b``.
        """
        parts = urlsplit(url)
        origin = f"{parts.scheme}://{parts.netloc}" if parts.scheme and parts.netloc else default_origin
        raw_path = parts.path or "/"
        return self.resolve(unquote(raw_path), origin, parts.query, raw_path=raw_path)
