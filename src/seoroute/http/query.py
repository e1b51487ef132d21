"""Request query string.

Redirects to the canonical alias carry ``raw`` through untouched;
document views can read single values by name.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qsl


class QueryParams(Mapping[str, str]):
    """The query string as received, plus first-value lookup by name."""

    __slots__ = ("_first", "raw")

    def __init__(self, query_string: bytes = b"") -> None:
        self.raw: str = query_string.decode("latin-1")
        first: dict[str, str] = {}
        for name, value in parse_qsl(self.raw, keep_blank_values=True):
            first.setdefault(name, value)
        self._first = first

    def __getitem__(self, name: str) -> str:
        return self._first[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._first)

    def __len__(self) -> int:
        return len(self._first)

    def __repr__(self) -> str:
        return f"QueryParams({self.raw!r})"
