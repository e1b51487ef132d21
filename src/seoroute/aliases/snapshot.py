"""Swappable holder for the current alias index.

Readers grab ``snapshot.current`` once and keep using that object for
the rest of their call; rebuilds produce a fresh index and replace the
reference in one assignment. A failed rebuild leaves the previous index
in service.

Thread safety:
    Reads take no lock. Writers hold a ``threading.Lock`` from fetch to
    swap, so of two overlapping refreshes the one that swaps last also
    fetched last and stale data never replaces fresh data.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING

import anyio

from seoroute.aliases.index import AliasIndex
from seoroute.documents import Document
from seoroute.errors import ConfigurationError

if TYPE_CHECKING:
    from seoroute.store import DocumentStore

logger = logging.getLogger("seoroute.snapshot")


class IndexSnapshot:
    """Holds the alias index currently in service.

    Usage::

        snapshot = IndexSnapshot()
        snapshot.rebuild(store.documents())
        entry = snapshot.current.lookup("/Product/Baz/")
    """

    __slots__ = ("_current", "_generation", "_write_lock")

    def __init__(self, index: AliasIndex | None = None) -> None:
        self._current: AliasIndex = index if index is not None else AliasIndex()
        self._generation: int = 0 if index is None else 1
        self._write_lock = threading.Lock()

    @property
    def current(self) -> AliasIndex:
        """The index in service right now."""
        return self._current

    @property
    def generation(self) -> int:
        """How many indexes have been swapped in so far."""
        return self._generation

    def swap(self, index: AliasIndex) -> AliasIndex:
        """Put *index* in service and return the one it replaces."""
        with self._write_lock:
            return self._install(index)

    def rebuild(self, documents: Iterable[Document]) -> AliasIndex:
        """Build an index from *documents* and swap it in.

        Raises ``ConfigurationError`` (and keeps the old index) when the
        alias data is inconsistent.
        """
        with self._write_lock:
            return self._rebuild_locked(documents)

    async def refresh(self, store: DocumentStore) -> AliasIndex:
        """Pull the full alias universe from *store* and rebuild.

        The store may block (network, disk), so fetch, build and swap run
        together in a worker thread while holding the write lock.
        """
        return await anyio.to_thread.run_sync(self._refresh_blocking, store)

    def _refresh_blocking(self, store: DocumentStore) -> AliasIndex:
        with self._write_lock:
            return self._rebuild_locked(list(store.documents()))

    def _rebuild_locked(self, documents: Iterable[Document]) -> AliasIndex:
        try:
            index = AliasIndex.build(documents)
        except ConfigurationError:
            logger.error("Alias index rebuild rejected; keeping generation %d", self._generation)
            raise
        self._install(index)
        return index

    def _install(self, index: AliasIndex) -> AliasIndex:
        # Caller holds _write_lock
        previous = self._current
        self._current = index
        self._generation += 1
        logger.info("Alias index swapped (generation %d, %d entries)", self._generation, len(index))
        return previous
