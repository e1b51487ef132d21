"""Tests for seoroute.routing.fallback — identifier-based fallback route."""

from urllib.parse import quote

import pytest

from seoroute.errors import ConfigurationError
from seoroute.routing.fallback import DEFAULT_TEMPLATE, PATH_SAFE, FallbackRoute
from seoroute.routing.params import CONVERTERS, parse_placeholder


class TestParsePlaceholder:
    def test_plain(self) -> None:
        assert parse_placeholder("{id}") == ("id", "str")

    def test_typed(self) -> None:
        assert parse_placeholder("{id:int}") == ("id", "int")

    def test_unknown_converter(self) -> None:
        with pytest.raises(KeyError):
            parse_placeholder("{id:uuid}")

    def test_converters_registered(self) -> None:
        assert set(CONVERTERS) == {"str", "int"}


class TestFallbackRoute:
    def test_default_template(self) -> None:
        route = FallbackRoute()
        assert route.template == DEFAULT_TEMPLATE == "/test/{id}/"
        assert route.param_name == "id"
        assert route.param_type == "str"

    def test_build(self, fallback: FallbackRoute) -> None:
        assert fallback.build("non_matching_id_2") == "/test/non_matching_id_2/"

    def test_match(self, fallback: FallbackRoute) -> None:
        assert fallback.match("/test/non_matching_id_2/") == "non_matching_id_2"

    def test_match_without_leading_slash(self, fallback: FallbackRoute) -> None:
        assert fallback.match("test/abc/") == "abc"

    def test_no_match(self, fallback: FallbackRoute) -> None:
        assert fallback.match("/Product/Baz/") is None
        assert fallback.match("/test/") is None
        assert fallback.match("/test/a/b/") is None
        assert fallback.match("/test/abc") is None

    def test_match_is_case_sensitive(self, fallback: FallbackRoute) -> None:
        assert fallback.match("/TEST/abc/") is None

    def test_template_gets_leading_slash(self) -> None:
        route = FallbackRoute("doc/{id}")
        assert route.template == "/doc/{id}"
        assert route.build("7") == "/doc/7"

    def test_custom_name_and_suffix(self) -> None:
        route = FallbackRoute("/items/{item}.html")
        assert route.param_name == "item"
        assert route.build("abc") == "/items/abc.html"
        assert route.match("/items/abc.html") == "abc"
        assert route.match("/items/abcXhtml") is None

    def test_int_converter(self) -> None:
        route = FallbackRoute("/p/{id:int}/")
        assert route.match("/p/42/") == "42"
        assert route.match("/p/forty-two/") is None

    def test_build_quotes_id(self, fallback: FallbackRoute) -> None:
        assert fallback.build("a b") == "/test/a%20b/"
        assert fallback.build("a/b") == "/test/a%2Fb/"

    def test_build_then_match_returns_id(self, fallback: FallbackRoute) -> None:
        for document_id in ["test_id", "Ümlaut-ö", "a b", "a/b", "100%", "123"]:
            assert fallback.match(fallback.build(document_id)) == document_id

    def test_match_unquotes_captured_id(self, fallback: FallbackRoute) -> None:
        assert fallback.match("/test/a%2Fb/") == "a/b"
        assert fallback.match("/test/%C3%9Cmlaut/") == "Ümlaut"

    def test_encoded_slash_is_not_a_separator(self, fallback: FallbackRoute) -> None:
        route = FallbackRoute("/doc/{id}")
        assert route.match("/doc/a%2Fb") == "a/b"
        assert route.match("/doc/a/b") is None

    def test_literal_parts_match_encoded(self) -> None:
        route = FallbackRoute("/Bücher/{id}/")
        # Clients escape the non-ASCII template text before sending
        sent = quote(route.build("x y"), safe=PATH_SAFE + "%")
        assert sent == "/B%C3%BCcher/x%20y/"
        assert route.match(sent) == "x y"
        assert route.match("/B%C3%BCcher/7/") == "7"


class TestFallbackRouteValidation:
    @pytest.mark.parametrize("template", ["/test/", "/test/{a}/{b}/", ""])
    def test_requires_exactly_one_placeholder(self, template: str) -> None:
        with pytest.raises(ConfigurationError, match="exactly one placeholder"):
            FallbackRoute(template)

    def test_unknown_converter(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown converter"):
            FallbackRoute("/test/{id:uuid}/")

    def test_frozen(self, fallback: FallbackRoute) -> None:
        with pytest.raises(AttributeError):
            fallback.template = "/x/{id}/"  # type: ignore[misc]
