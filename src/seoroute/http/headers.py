"""Case-insensitive request headers.

Built from the ASGI ``headers`` pairs. Names are lower-cased once; for
a repeated header the first value is the one seen.
"""

from collections.abc import Iterable, Iterator, Mapping


class Headers(Mapping[str, str]):
    """Read-only, case-insensitive header lookup.

    The pipeline reads ``Host`` to build redirect URLs; document views
    get the same object through ``request.headers``.
    """

    __slots__ = ("_first",)

    def __init__(self, raw: Iterable[tuple[bytes, bytes]] = ()) -> None:
        first: dict[str, str] = {}
        for name, value in raw:
            first.setdefault(name.decode("latin-1").lower(), value.decode("latin-1"))
        self._first = first

    def __getitem__(self, name: str) -> str:
        return self._first[name.lower()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._first

    def __iter__(self) -> Iterator[str]:
        return iter(self._first)

    def __len__(self) -> int:
        return len(self._first)

    def __repr__(self) -> str:
        return f"Headers({self._first!r})"
