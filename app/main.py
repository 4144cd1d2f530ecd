# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the gallery server.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --port 3000
#   poetry run python scripts/start_server.py
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import Settings, settings as default_settings
from app.dependencies import build_gallery_context
from app.exceptions import (
    GalleryException,
    gallery_exception_handler,
    validation_exception_handler,
)
from app.routers import catalog, detail, gallery, health, images, static, upload
from app.routers import settings as settings_routes

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if default_settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the gallery application.

    Args:
        settings: Settings to use (defaults to the environment-loaded settings)

    Returns:
        Configured FastAPI application
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        - Startup: load templates, stylesheets and config.json
        - Shutdown: nothing to release; all state is in memory or on disk
        """
        logger.info(f"Starting gallery server in {settings.ENVIRONMENT} mode")
        app.state.gallery = build_gallery_context(settings)
        logger.info(f"Templates loaded: {app.state.gallery.templates.names}")

        yield

        logger.info("Shutting down gallery server")

    app = FastAPI(
        title="Photo Gallery",
        description="""
## Photo Gallery Server

Lists the images in `images/`, shows a detail page per image from its
`catalog/<basename>.json` entry, and accepts uploads.

### Quick Start

```bash
# Upload an image with its metadata
curl -X POST http://localhost:3000/gallery \\
  -F "image=@sunset.png" -F "title=Sunset" -F "description=Over the bay"

# Rename the gallery
curl -X PUT http://localhost:3000/api/v1/settings \\
  -H "Content-Type: application/json" -d '{"title": "Summer 2024"}'
```
""",
        version="1.0.0",
        docs_url=None if settings.is_production else "/api/v1/docs",
        redoc_url=None,
        openapi_url=None if settings.is_production else "/api/v1/openapi.json",
        lifespan=lifespan,
    )

    # =========================================================================
    # Middleware
    # =========================================================================

    @app.middleware("http")
    async def apply_title_query(request: Request, call_next):
        """
        Apply a ?title= query parameter on any request.

        The title is persisted before the request is dispatched, so the
        response to this same request already shows it.
        """
        title = request.query_params.get("title")
        if title:
            config_store = request.app.state.gallery.config_store
            try:
                await run_in_threadpool(config_store.update_title, title)
            except GalleryException as exc:
                return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
        return await call_next(request)

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(GalleryException, gallery_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Server error",
                "code": "INTERNAL_ERROR",
            }
        )

    # =========================================================================
    # Routers
    # =========================================================================
    # JSON API first, then fixed HTML paths; the image catch-all goes last.

    app.include_router(health.router, prefix="/api/v1", tags=["Health"])
    app.include_router(settings_routes.router, prefix="/api/v1", tags=["Settings"])
    app.include_router(catalog.router, prefix="/api/v1", tags=["Catalog"])
    app.include_router(static.router, tags=["Static"])
    app.include_router(gallery.router, tags=["Gallery"])
    app.include_router(upload.router, tags=["Upload"])
    app.include_router(detail.router, tags=["Detail"])
    app.include_router(images.router, tags=["Images"])

    return app


app = create_app()
