"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from seoroute.routing.fallback import DEFAULT_TEMPLATE, FallbackRoute
from seoroute.routing.generator import DEFAULT_RESERVED


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(fallback_path="/doc/{id}/", redirect_status=308)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Routing
    fallback_path: str = DEFAULT_TEMPLATE  # Exactly one placeholder, e.g. "/test/{id}/"
    seo_key_param: str = "_seo_key"  # url_for() param naming the alias key
    reserved_params: tuple[str, ...] = DEFAULT_RESERVED  # Never emitted in query strings
    redirect_status: int = 301

    # Index lifecycle
    refresh_on_startup: bool = True  # Rebuild from the store during ASGI lifespan startup

    # Logging
    log_level: str = "info"

    def fallback_route(self) -> FallbackRoute:
        """Compile ``fallback_path``. Raises ``ConfigurationError`` if invalid."""
        return FallbackRoute(self.fallback_path)
