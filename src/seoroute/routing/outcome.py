"""Resolution outcomes — one frozen dataclass per terminal state.

Callers dispatch with ``match``::

    match resolver.resolve(path, origin):
        case ServeDirect(document_id=doc_id, key=key): ...
        case RedirectToCanonical(url=url): ...
        case ServeById(document_id=doc_id): ...
        case NotFound(): ...
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServeDirect:
    """The path is a live alias in its canonical casing."""

    document_id: str
    key: str


@dataclass(frozen=True, slots=True)
class RedirectToCanonical:
    """The path is a live alias in the wrong casing, or an expired alias.

    ``url`` is absolute (scheme and host from the request) and carries the
    original query string unchanged.
    """

    url: str
    document_id: str = ""
    key: str = ""
    expired: bool = False


@dataclass(frozen=True, slots=True)
class ServeById:
    """No alias matched; the fallback route yielded a document id."""

    document_id: str


@dataclass(frozen=True, slots=True)
class NotFound:
    """Neither an alias nor the fallback route matched."""

    path: str = ""


ResolutionOutcome = ServeDirect | RedirectToCanonical | ServeById | NotFound
