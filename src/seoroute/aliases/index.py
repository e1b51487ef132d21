"""Case-insensitive alias index.

Built once from the full alias universe, then read without locks.
Lookup keys are Unicode case-folded; canonical paths keep their
original casing and are never rewritten.
"""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from seoroute.documents import Document
from seoroute.errors import AliasConflictError, DuplicateAliasKeyError

logger = logging.getLogger("seoroute.index")


def strip_path(path: str) -> str:
    """Drop one leading slash so ``/Product/Baz/`` and ``Product/Baz/`` compare equal.

    Only one: ``//Product/Baz/`` is not the canonical spelling.
    """
    return path.removeprefix("/")


def fold(path: str) -> str:
    """Normalize *path* into its lookup key.

    Full Unicode case folding (``ß`` -> ``ss``, ``Ü`` -> ``ü``), wrapped
    in NFC so composed and decomposed spellings of the same letter meet.
    Any run of leading slashes is ignored, so ``//Product/Baz/`` finds the
    alias and gets redirected like a casing variant.

    Examples::

        >>> fold("/Product/BÜz/bÄß/")
        'product/büz/bäss/'
    """
    composed = unicodedata.normalize("NFC", path.lstrip("/"))
    return unicodedata.normalize("NFC", composed.casefold())


@dataclass(frozen=True, slots=True)
class AliasIndexEntry:
    """What a normalized path denotes.

    ``source_path`` is the alias as the document spells it. For live
    entries it equals ``canonical_path``; for expired entries
    ``canonical_path`` is the live alias currently holding the same
    document and key, which is where requests get redirected to.
    """

    normalized_path: str
    document_id: str
    key: str
    canonical_path: str
    source_path: str
    is_expired: bool = False


class AliasIndex:
    """Immutable mapping from folded request paths to alias entries.

    Usage::

        index = AliasIndex.build(documents)
        entry = index.lookup("/product/baz/")
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: dict[str, AliasIndexEntry] | None = None) -> None:
        self._entries: dict[str, AliasIndexEntry] = dict(entries or {})

    @classmethod
    def build(cls, documents: Iterable[Document]) -> AliasIndex:
        """Build an index from every document's live and expired aliases.

        Raises ``AliasConflictError`` when two live aliases fold to the
        same path, and ``DuplicateAliasKeyError`` when a document repeats
        a live key. Nothing is returned in either case.
        """
        docs = tuple(documents)
        entries: dict[str, AliasIndexEntry] = {}
        # Original (unfolded) path per live entry, for conflict messages
        claimed: dict[str, str] = {}

        for doc in docs:
            seen_keys: set[str] = set()
            for alias in doc.aliases:
                if alias.key in seen_keys:
                    raise DuplicateAliasKeyError(doc.id, alias.key)
                seen_keys.add(alias.key)

                normalized = fold(alias.path)
                existing = entries.get(normalized)
                if existing is not None:
                    raise AliasConflictError(
                        normalized,
                        (existing.document_id, claimed[normalized]),
                        (doc.id, alias.path),
                    )
                entries[normalized] = AliasIndexEntry(
                    normalized_path=normalized,
                    document_id=doc.id,
                    key=alias.key,
                    canonical_path=strip_path(alias.path),
                    source_path=strip_path(alias.path),
                )
                claimed[normalized] = alias.path

        # Expired aliases go in second so a live alias always wins a collision
        expired_count = 0
        for doc in docs:
            for alias in doc.expired_aliases:
                normalized = fold(alias.path)
                existing = entries.get(normalized)
                if existing is not None:
                    if existing.is_expired:
                        logger.warning(
                            "Expired alias %r of document %r already claimed by document %r; skipped",
                            alias.path,
                            doc.id,
                            existing.document_id,
                        )
                    continue

                current = doc.alias_for(alias.key)
                if current is None:
                    logger.warning(
                        "Expired alias %r of document %r has no live alias for key %r; skipped",
                        alias.path,
                        doc.id,
                        alias.key,
                    )
                    continue

                entries[normalized] = AliasIndexEntry(
                    normalized_path=normalized,
                    document_id=doc.id,
                    key=alias.key,
                    canonical_path=strip_path(current.path),
                    source_path=strip_path(alias.path),
                    is_expired=True,
                )
                expired_count += 1

        logger.info(
            "Alias index built: %d documents, %d live aliases, %d expired aliases",
            len(docs),
            len(entries) - expired_count,
            expired_count,
        )
        return cls(entries)

    def lookup(self, path: str) -> AliasIndexEntry | None:
        """Return the entry *path* denotes regardless of casing, or ``None``."""
        return self._entries.get(fold(path))

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and fold(path) in self._entries

    def __iter__(self) -> Iterator[AliasIndexEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"AliasIndex({len(self._entries)} entries)"


def build_index(documents: Iterable[Document]) -> AliasIndex:
    """Build an ``AliasIndex``. Shorthand for ``AliasIndex.build``."""
    return AliasIndex.build(documents)
