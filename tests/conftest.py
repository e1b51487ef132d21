"""Shared fixtures: the product catalogue used across resolver, generator, and app tests."""

import pytest

from seoroute.aliases.index import AliasIndex
from seoroute.documents import AliasEntry, Document
from seoroute.routing.fallback import FallbackRoute


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def catalogue() -> list[Document]:
    """Three products: a competing alias, a well-aliased product, and a bare one."""
    return [
        Document(
            id="non_matching_id_1",
            aliases=(AliasEntry("Product/Foo/Bär2/", "foo_bar"),),
        ),
        Document(
            id="test_id",
            aliases=(
                AliasEntry("Product/Foo/Bär/", "foo_bar"),
                AliasEntry("Product/Foö/Büg/", "foo_bug"),
                AliasEntry("Product/Baz/", "baz"),
                AliasEntry("Product/Baz/baz/", "baz_baz"),
                AliasEntry("Product/Büz/bäß/", "buz_bas"),
            ),
        ),
        Document(id="non_matching_id_2"),
    ]


@pytest.fixture
def documents_by_id(catalogue: list[Document]) -> dict[str, Document]:
    return {doc.id: doc for doc in catalogue}


@pytest.fixture
def index(catalogue: list[Document]) -> AliasIndex:
    return AliasIndex.build(catalogue)


@pytest.fixture
def fallback() -> FallbackRoute:
    return FallbackRoute("/test/{id}/")
