"""Outbound URL generation — document + key to path.

Never fails for a document without aliases: the fallback route is
always constructable from the id alone.
"""

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import urlencode

from seoroute.aliases.index import strip_path
from seoroute.documents import Document
from seoroute.routing.fallback import FallbackRoute

DEFAULT_RESERVED: tuple[str, ...] = ("document", "_seo_key")


def build_query(params: Mapping[str, Any] | None, reserved: Iterable[str] = ()) -> str:
    """Encode *params* in caller order, skipping *reserved* names and ``None`` values.

    Sequence values repeat the key (``tag=a&tag=b``).
    """
    if not params:
        return ""
    skip = frozenset(reserved)
    pairs = [(name, value) for name, value in params.items() if name not in skip and value is not None]
    return urlencode(pairs, doseq=True)


def generate(
    document: Document,
    key: str | None = None,
    params: Mapping[str, Any] | None = None,
    *,
    fallback: FallbackRoute,
    reserved: Iterable[str] = DEFAULT_RESERVED,
) -> str:
    """Return the path (plus query string) for *document*.

    Uses the live alias registered under *key* when there is one,
    otherwise the fallback route for ``document.id``.

    Examples::

        >>> generate(doc, "baz", {"test": "test"}, fallback=route)
        '/Product/Baz/?test=test'
        >>> generate(bare_doc, None, {"test": "test"}, fallback=route)
        '/test/non_matching_id_2/?test=test'
    """
    entry = document.alias_for(key) if key is not None else None
    if entry is not None:
        path = "/" + strip_path(entry.path)
    else:
        path = fallback.build(document.id)

    query = build_query(params, reserved)
    if query:
        return f"{path}?{query}"
    return path


class Generator:
    """Generates paths with a fixed fallback route and reserved names.

    Usage::

        generator = Generator(FallbackRoute("/test/{id}/"))
        generator.generate(document, "baz", {"test": "test"})
    """

    __slots__ = ("fallback", "reserved")

    def __init__(
        self,
        fallback: FallbackRoute | None = None,
        reserved: Iterable[str] = DEFAULT_RESERVED,
    ) -> None:
        self.fallback = fallback or FallbackRoute()
        self.reserved: tuple[str, ...] = tuple(reserved)

    def generate(
        self,
        document: Document,
        key: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> str:
        """See ``generate``."""
        return generate(document, key, params, fallback=self.fallback, reserved=self.reserved)
