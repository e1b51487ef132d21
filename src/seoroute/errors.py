"""seoroute exception hierarchy.

Shared across the alias index, resolver, and ASGI handler so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class SeoRouteError(Exception):
    """Base for all seoroute-specific errors."""


class ConfigurationError(SeoRouteError):
    """Raised when configuration or alias data is invalid.

    Raised while building an alias index or compiling a fallback
    template, never while serving a request.
    """


class AliasConflictError(ConfigurationError):
    """Two live aliases fold to the same normalized path.

    The mapping would be ambiguous, so the whole index build is rejected.
    """

    def __init__(
        self,
        normalized_path: str,
        first: tuple[str, str],
        second: tuple[str, str],
    ) -> None:
        self.normalized_path = normalized_path
        self.first = first
        self.second = second
        msg = (
            f"Alias conflict on {normalized_path!r}: "
            f"{first[1]!r} (document {first[0]!r}) and "
            f"{second[1]!r} (document {second[0]!r}) fold to the same path."
        )
        super().__init__(msg)


class DuplicateAliasKeyError(ConfigurationError):
    """A document declares the same key on more than one live alias."""

    def __init__(self, document_id: str, key: str) -> None:
        self.document_id = document_id
        self.key = key
        super().__init__(f"Document {document_id!r} has more than one alias with key {key!r}.")


class InvalidOriginError(SeoRouteError):
    """A redirect was needed but the request origin lacks a scheme or host."""


@dataclass(frozen=True, slots=True)
class HTTPError(SeoRouteError):
    """An error that maps directly to an HTTP status code.

    Raised inside the request pipeline. The ASGI handler catches these
    and dispatches to the matching ``@app.error()`` handler.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class HTTPNotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no alias or fallback route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
