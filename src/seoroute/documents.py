"""Document and alias records.

Documents are owned by an external store; seoroute only reads their
identity and alias lists. Both types are frozen so an index built from
them can be shared between threads.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class AliasEntry:
    """A human-readable path bound to a semantic key.

    ``path`` keeps its original casing; that casing is what generation
    emits and what redirects point to.
    """

    path: str
    key: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> AliasEntry:
        """Accept ``{"path": ..., "key": ...}`` or the index shape ``{"url": ..., "key": ...}``."""
        path = data.get("path", data.get("url"))
        if not isinstance(path, str) or not path:
            msg = f"Alias entry has no path: {dict(data)!r}"
            raise ValueError(msg)
        return cls(path=path, key=str(data.get("key", "")))


@dataclass(frozen=True, slots=True)
class Document:
    """A routable document: an id plus its live and expired aliases."""

    id: str
    aliases: tuple[AliasEntry, ...] = ()
    expired_aliases: tuple[AliasEntry, ...] = ()

    def alias_for(self, key: str) -> AliasEntry | None:
        """Return the first live alias with *key*, or ``None``."""
        for entry in self.aliases:
            if entry.key == key:
                return entry
        return None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Document:
        """Build a Document from a decoded JSON object.

        Understands both the attribute names of this class and the
        search-index document shape::

            {"id": "test_id",
             "url": [{"url": "Product/Baz/", "key": "baz"}],
             "expired_url": []}
        """
        doc_id = data.get("id", data.get("_id"))
        if doc_id is None or doc_id == "":
            msg = f"Document has no id: {dict(data)!r}"
            raise ValueError(msg)
        aliases = data.get("aliases", data.get("url")) or ()
        expired = data.get("expired_aliases", data.get("expired_url")) or ()
        return cls(
            id=str(doc_id),
            aliases=_entries(aliases),
            expired_aliases=_entries(expired),
        )


def _entries(items: Iterable[AliasEntry | Mapping[str, Any]]) -> tuple[AliasEntry, ...]:
    return tuple(
        item if isinstance(item, AliasEntry) else AliasEntry.from_mapping(item) for item in items
    )
