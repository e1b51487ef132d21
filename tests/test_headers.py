"""Tests for seoroute.http.headers — immutable, case-insensitive Headers."""

import pytest

from seoroute.http.headers import Headers


def _h(*pairs: tuple[str, str]) -> Headers:
    """Shorthand: build Headers from string pairs."""
    raw = tuple((k.encode("latin-1"), v.encode("latin-1")) for k, v in pairs)
    return Headers(raw)


class TestHeaders:
    def test_case_insensitive(self) -> None:
        h = _h(("Host", "localhost:8000"))
        assert h["host"] == "localhost:8000"
        assert h["HOST"] == "localhost:8000"

    def test_missing_key_raises(self) -> None:
        h = _h(("Accept", "*/*"))
        with pytest.raises(KeyError):
            h["X-Missing"]

    def test_contains(self) -> None:
        h = _h(("Accept", "*/*"))
        assert "accept" in h
        assert "x-missing" not in h
        assert 42 not in h  # type: ignore[operator]

    def test_repeated_header_keeps_first(self) -> None:
        h = _h(("X-Forwarded-Host", "a.example"), ("X-Forwarded-Host", "b.example"))
        assert h["x-forwarded-host"] == "a.example"

    def test_len_deduplicates(self) -> None:
        h = _h(("Set-Cookie", "a=1"), ("Set-Cookie", "b=2"), ("Host", "x"))
        assert len(h) == 2

    def test_iter_yields_unique_lowercase_keys(self) -> None:
        h = _h(("Accept", "*/*"), ("Host", "x"), ("Accept", "text/xml"))
        assert list(h) == ["accept", "host"]

    def test_get_with_default(self) -> None:
        h = _h(("Accept", "*/*"))
        assert h.get("accept") == "*/*"
        assert h.get("x-missing") is None
        assert h.get("x-missing", "fallback") == "fallback"

    def test_empty(self) -> None:
        assert len(Headers()) == 0

    def test_repr(self) -> None:
        assert repr(_h(("Host", "x"))) == "Headers({'host': 'x'})"
