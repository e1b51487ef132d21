"""seoroute application class.

Mutable during setup (document view, error handlers, lifecycle hooks).
Frozen on first use: the fallback route is compiled and the resolver
wired to the index snapshot.
"""

import inspect
import threading
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from seoroute._internal.asgi import DocumentView, ErrorHandler, Receive, Scope, Send, invoke
from seoroute.aliases.index import AliasIndex
from seoroute.aliases.snapshot import IndexSnapshot
from seoroute.config import AppConfig
from seoroute.documents import Document
from seoroute.errors import ConfigurationError
from seoroute.routing.generator import Generator
from seoroute.routing.outcome import ResolutionOutcome
from seoroute.routing.resolver import Resolver
from seoroute.server.handler import default_view, handle_request
from seoroute.store import DocumentStore


class App:
    """The seoroute ASGI application.

    Serves documents under their SEO aliases, redirects stale or
    mis-cased paths to the canonical alias, and falls back to the
    identifier route.

    Usage::

        store = InMemoryDocumentStore(load_documents("products.json"))
        app = App(store=store)

        @app.document_view
        def product(document_id: str, seo_key: str | None):
            return {"document_id": document_id, "seo_key": seo_key}

    Thread safety:
        Setup is single-threaded. The freeze transition uses a Lock +
        double-check so exactly one thread compiles the app. The alias
        index lives in an ``IndexSnapshot`` that is swapped, never mutated.
    """

    __slots__ = (
        "_error_handlers",
        "_freeze_lock",
        "_frozen",
        "_generator",
        "_resolver",
        "_shutdown_hooks",
        "_snapshot",
        "_startup_hooks",
        "_view",
        "config",
        "store",
    )

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        store: DocumentStore | None = None,
        documents: Iterable[Document] | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self.store: DocumentStore | None = store
        self._view: DocumentView | None = None
        self._error_handlers: dict[int | type, ErrorHandler] = {}
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()
        self._snapshot: IndexSnapshot = IndexSnapshot()

        # Compiled state — set during _freeze()
        self._resolver: Resolver | None = None
        self._generator: Generator | None = None

        # Eager documents: build now so conflicts surface at construction
        if documents is not None:
            self._snapshot.rebuild(documents)

    # -- Registration --

    def document_view(self, func: DocumentView) -> DocumentView:
        """Register the handler for served documents via decorator.

        Parameters are injected by name: ``request``, ``document_id``,
        ``seo_key`` (``None`` on the fallback route), and ``document``
        (fetched from the store; 404 if it is gone).
        """
        self._check_not_frozen()
        self._view = func
        return func

    def error(
        self,
        code_or_exception: int | type[Exception],
    ) -> Callable[[ErrorHandler], ErrorHandler]:
        """Register an error handler via decorator."""

        def decorator(func: ErrorHandler) -> ErrorHandler:
            self._check_not_frozen()
            self._error_handlers[code_or_exception] = func
            return func

        return decorator

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync startup hook via decorator.

        Hooks run after the startup index refresh, in registration order.
        """
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync shutdown hook via decorator."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Alias index --

    @property
    def index(self) -> AliasIndex:
        """The alias index currently in service."""
        return self._snapshot.current

    @property
    def snapshot(self) -> IndexSnapshot:
        return self._snapshot

    def reindex(self, documents: Iterable[Document]) -> AliasIndex:
        """Rebuild the index from *documents* and swap it in.

        Raises ``ConfigurationError`` on conflicting aliases; the
        previous index stays in service.
        """
        return self._snapshot.rebuild(documents)

    async def refresh(self) -> AliasIndex:
        """Rebuild the index from the configured store."""
        if self.store is None:
            msg = "App.refresh() needs a document store. Pass store= to App()."
            raise ConfigurationError(msg)
        return await self._snapshot.refresh(self.store)

    # -- Generation and resolution --

    def url_for(self, document: Document, key: str | None = None, /, **params: Any) -> str:
        """Generate the path for *document*.

        *key* may also be given as the ``_seo_key`` param (see
        ``AppConfig.seo_key_param``). Reserved params never reach the
        query string.
        """
        self._ensure_frozen()
        assert self._generator is not None
        if key is None:
            key = params.get(self.config.seo_key_param)
        return self._generator.generate(document, key, params)

    def url_for_params(self, params: Mapping[str, Any]) -> str:
        """Generate from a single mapping holding ``document`` and optionally ``_seo_key``."""
        document = params.get("document")
        if not isinstance(document, Document):
            msg = "url_for_params() needs a Document under the 'document' key."
            raise TypeError(msg)
        return self.url_for(document, **{k: v for k, v in params.items() if k != "document"})

    def resolve(
        self,
        path: str,
        origin: str | None = None,
        query: str = "",
        *,
        raw_path: str | None = None,
    ) -> ResolutionOutcome:
        """Resolve a decoded request path against the current index.

        Pass *raw_path* (still percent-encoded) when it is at hand so ids
        holding a quoted ``/`` reach the fallback route intact.
        """
        self._ensure_frozen()
        assert self._resolver is not None
        return self._resolver.resolve(path, origin, query, raw_path=raw_path)

    def resolve_url(self, url: str, default_origin: str | None = None) -> ResolutionOutcome:
        """Resolve an absolute URL (or a relative one against *default_origin*)."""
        self._ensure_frozen()
        assert self._resolver is not None
        return self._resolver.resolve_url(url, default_origin)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        self._ensure_frozen()
        assert self._resolver is not None

        await handle_request(
            scope,
            receive,
            send,
            resolver=self._resolver,
            view=self._view or default_view,
            store=self.store,
            error_handlers=self._error_handlers,
            redirect_status=self.config.redirect_status,
            debug=self.config.debug,
        )

    async def startup(self) -> None:
        """Refresh the index from the store (if configured) and run startup hooks."""
        self._ensure_frozen()
        if self.store is not None and self.config.refresh_on_startup:
            await self.refresh()
        for hook in self._startup_hooks:
            await invoke(hook)

    async def shutdown(self) -> None:
        """Run shutdown hooks."""
        for hook in self._shutdown_hooks:
            await invoke(hook)

    async def _handle_lifespan(
        self,
        scope: Scope,  # noqa: ARG002
        receive: Receive,
        send: Send,
    ) -> None:
        """Run the ASGI lifespan protocol."""
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await self.startup()
                    await send({"type": "lifespan.startup.complete"})
                except Exception as exc:
                    await send(
                        {
                            "type": "lifespan.startup.failed",
                            "message": str(exc),
                        }
                    )
                    return

            elif msg_type == "lifespan.shutdown":
                await self.shutdown()
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the fallback route and wire resolver and generator."""
        fallback = self.config.fallback_route()

        view = self._view
        if view is not None and self.store is None:
            params = inspect.signature(view).parameters
            if "document" in params:
                msg = (
                    f"Document view {view.__name__!r} takes 'document' but the app "
                    "has no document store. Pass store= to App()."
                )
                raise ConfigurationError(msg)

        self._resolver = Resolver(self._snapshot, fallback)
        self._generator = Generator(fallback, self.config.reserved_params)
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = "Cannot modify the app after it has started serving requests."
            raise RuntimeError(msg)
