"""Tests for seoroute.http.response — chainable Response and Redirect."""

import pytest

from seoroute.http.response import Redirect, Response


class TestResponse:
    def test_defaults(self) -> None:
        response = Response()
        assert response.status == 200
        assert response.content_type == "text/html; charset=utf-8"
        assert response.headers == ()

    def test_with_status_returns_new(self) -> None:
        original = Response(body="x")
        changed = original.with_status(404)
        assert original.status == 200
        assert changed.status == 404
        assert changed.body == "x"

    def test_with_header_appends(self) -> None:
        response = Response().with_header("X-A", "1").with_header("X-A", "2")
        assert response.headers == (("X-A", "1"), ("X-A", "2"))

    def test_with_headers(self) -> None:
        response = Response().with_headers({"X-A": "1", "X-B": "2"})
        assert response.header("x-b") == "2"

    def test_with_content_type(self) -> None:
        assert Response().with_content_type("text/plain").content_type == "text/plain"

    def test_header_lookup(self) -> None:
        response = Response(headers=(("Location", "/a/"), ("location", "/b/")))
        assert response.header("LOCATION") == "/a/"
        assert response.header("x-missing") is None

    def test_is_redirect(self) -> None:
        assert Response(status=301).with_header("Location", "/x/").is_redirect
        assert not Response(status=301).is_redirect
        assert not Response().with_header("Location", "/x/").is_redirect

    def test_body_conversions(self) -> None:
        assert Response(body="Bär").body_bytes == "Bär".encode()
        assert Response(body="Bär".encode()).text == "Bär"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Response().status = 500  # type: ignore[misc]


class TestRedirect:
    def test_defaults(self) -> None:
        redirect = Redirect("/x/")
        assert redirect.status == 302
        assert redirect.headers == ()
