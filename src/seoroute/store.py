"""Document store interface and an in-memory implementation.

The real store (a search index, a database) lives outside seoroute.
All the core needs is the full alias universe for index builds and a
by-id lookup for document views.
"""

from __future__ import annotations

import json
import threading
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Protocol, runtime_checkable

from seoroute.documents import Document


@runtime_checkable
class DocumentStore(Protocol):
    """Anything that can list every document and fetch one by id.

    ``documents()`` may block; callers on an event loop run it in a
    worker thread (see ``IndexSnapshot.refresh``).
    """

    def documents(self) -> Iterable[Document]: ...
    def get(self, document_id: str) -> Document | None: ...


class InMemoryDocumentStore:
    """A dict-backed ``DocumentStore``.

    Mutations replace the stored document wholesale; call
    ``App.refresh()`` afterwards to rebuild the alias index.
    """

    __slots__ = ("_docs", "_lock")

    def __init__(self, documents: Iterable[Document] = ()) -> None:
        self._lock = threading.Lock()
        self._docs: dict[str, Document] = {}
        for doc in documents:
            self._docs[doc.id] = doc

    def documents(self) -> list[Document]:
        with self._lock:
            return list(self._docs.values())

    def get(self, document_id: str) -> Document | None:
        return self._docs.get(document_id)

    def put(self, document: Document) -> None:
        """Insert or replace a document."""
        with self._lock:
            self._docs[document.id] = document

    def remove(self, document_id: str) -> None:
        """Delete a document. Missing ids are ignored."""
        with self._lock:
            self._docs.pop(document_id, None)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents())

    def __len__(self) -> int:
        return len(self._docs)

    @classmethod
    def from_file(cls, path: str | Path) -> InMemoryDocumentStore:
        """Load a store from a JSON file (see ``load_documents``)."""
        return cls(load_documents(path))


def load_documents(path: str | Path) -> list[Document]:
    """Read a JSON array of documents.

    Each element is passed to ``Document.from_mapping``, so files exported
    from the search index (``url`` / ``expired_url`` fields) load as-is.

    Raises:
        ValueError: If the file is not a JSON array or an element is not
            a valid document.
    """
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        msg = f"{path}: expected a JSON array of documents, got {type(raw).__name__}"
        raise ValueError(msg)
    return [Document.from_mapping(item) for item in raw]
