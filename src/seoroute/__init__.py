"""seoroute — SEO-friendly alias URLs for documents.

Resolves human-readable paths to documents (redirecting mis-cased and
expired aliases to the canonical one) and generates those paths back
from a document plus a semantic key.

Basic usage::

    from seoroute import App, InMemoryDocumentStore, load_documents

    app = App(store=InMemoryDocumentStore(load_documents("products.json")))

    @app.document_view
    def product(document_id: str, seo_key: str | None):
        return {"document_id": document_id, "seo_key": seo_key}

Pure core, no ASGI::

    from seoroute import AliasIndex, FallbackRoute, generate, resolve

    index = AliasIndex.build(documents)
    outcome = resolve(index, "/Product/baz/", "http://localhost", fallback=FallbackRoute())
"""

__version__ = "0.1.0"
__all__ = [
    "AliasConflictError",
    "AliasEntry",
    "AliasIndex",
    "AliasIndexEntry",
    "App",
    "AppConfig",
    "ConfigurationError",
    "Document",
    "DocumentStore",
    "DuplicateAliasKeyError",
    "FallbackRoute",
    "Generator",
    "InMemoryDocumentStore",
    "IndexSnapshot",
    "InvalidOriginError",
    "NotFound",
    "RedirectToCanonical",
    "ResolutionOutcome",
    "Resolver",
    "SeoRouteError",
    "ServeById",
    "ServeDirect",
    "generate",
    "load_documents",
    "resolve",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "AliasConflictError": "seoroute.errors",
    "AliasEntry": "seoroute.documents",
    "AliasIndex": "seoroute.aliases.index",
    "AliasIndexEntry": "seoroute.aliases.index",
    "App": "seoroute.app",
    "AppConfig": "seoroute.config",
    "ConfigurationError": "seoroute.errors",
    "Document": "seoroute.documents",
    "DocumentStore": "seoroute.store",
    "DuplicateAliasKeyError": "seoroute.errors",
    "FallbackRoute": "seoroute.routing.fallback",
    "Generator": "seoroute.routing.generator",
    "InMemoryDocumentStore": "seoroute.store",
    "IndexSnapshot": "seoroute.aliases.snapshot",
    "InvalidOriginError": "seoroute.errors",
    "NotFound": "seoroute.routing.outcome",
    "RedirectToCanonical": "seoroute.routing.outcome",
    "ResolutionOutcome": "seoroute.routing.outcome",
    "Resolver": "seoroute.routing.resolver",
    "SeoRouteError": "seoroute.errors",
    "ServeById": "seoroute.routing.outcome",
    "ServeDirect": "seoroute.routing.outcome",
    "generate": "seoroute.routing.generator",
    "load_documents": "seoroute.store",
    "resolve": "seoroute.routing.resolver",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import seoroute`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
