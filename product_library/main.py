"""
==============================================================================
Product Library - Application Entry Point
==============================================================================

FastAPI application with:
- Product library browsing and editing
- Company catalog curation (import / reconcile)
- Category tree management

Usage:
------
    # Development
    uvicorn product_library.main:app --reload

    # Production
    uvicorn product_library.main:app --host 0.0.0.0 --port 8000

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from product_library.config import get_settings
from product_library.core.exceptions import register_exception_handlers
from product_library.api.router import api_router
from product_library.catalog.catalog import init_catalog


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Handles application lifecycle including:
    - Catalog loading on startup
    - Middleware configuration
    - Router registration
    - Exception handler setup
    """

    def __init__(self):
        """Initialize the application."""
        self._settings = get_settings()
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="Product reference library and company catalog management",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        self._configure_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router)
        self._register_root(app)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup()
        yield
        self._shutdown()

    def _startup(self) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"Starting {self._settings.app_name}")
        logger.info("=" * 60)

        self._load_catalog()

        logger.info(f"Running on http://{self._settings.host}:{self._settings.port}")
        logger.info(f"API Docs: http://{self._settings.host}:{self._settings.port}/docs")

    def _shutdown(self) -> None:
        """Application shutdown tasks."""
        logger.info("Shutdown complete")

    def _load_catalog(self) -> None:
        """Load the catalog document; a broken file leaves the catalog unloaded."""
        try:
            catalog = init_catalog(self._settings.catalog_path, autosave=self._settings.autosave)
            logger.info(
                f"Catalog ready: {len(catalog.products)} products, "
                f"{len(catalog.company_portfolio())} in company catalog"
            )
        except (OSError, ValueError) as e:
            # json.JSONDecodeError and pydantic.ValidationError are ValueErrors
            logger.error(f"Failed to load catalog from {self._settings.catalog_path}: {e}")

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    def _register_root(self, app: FastAPI) -> None:
        """Register root endpoint."""

        @app.get("/", include_in_schema=False)
        async def root():
            """Redirect to the API docs."""
            return RedirectResponse(url="/docs")

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "product_library.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
