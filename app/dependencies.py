# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
#
# Everything the gallery loads at startup (templates, stylesheets, config)
# and the services built on top of it live in one GalleryContext, created in
# the application lifespan and stored on app.state. Route handlers receive
# it through the GalleryDep alias.
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from core.services import CatalogService, ConfigStore, PageBuilder, TemplateStore, UploadService

logger = logging.getLogger(__name__)


@dataclass
class GalleryContext:
    """Process-wide gallery state, loaded once at startup."""

    settings: Settings
    templates: TemplateStore
    config_store: ConfigStore
    catalog: CatalogService
    pages: PageBuilder
    uploads: UploadService
    gallery_stylesheet: bytes
    detail_stylesheet: bytes


def build_gallery_context(settings: Settings) -> GalleryContext:
    """
    Load templates, stylesheets and config, and wire up the services.

    Raises:
        OSError: If a templates directory or stylesheet is missing
        ValueError: If config.json exists but is invalid
    """
    logger.info(f"Loading gallery from {settings.GALLERY_ROOT.resolve()}")

    templates = TemplateStore()
    templates.load_dir(settings.templates_dir)

    config_store = ConfigStore(settings.config_path, default_title=settings.DEFAULT_TITLE)
    config_store.load()

    settings.images_dir.mkdir(parents=True, exist_ok=True)
    settings.catalog_dir.mkdir(parents=True, exist_ok=True)

    return GalleryContext(
        settings=settings,
        templates=templates,
        config_store=config_store,
        catalog=CatalogService(settings.images_dir, settings.catalog_dir),
        pages=PageBuilder(templates, config_store),
        uploads=UploadService(
            settings.images_dir,
            settings.catalog_dir,
            allowed_extensions=settings.allowed_extensions_list,
            max_upload_size_bytes=settings.max_upload_size_bytes,
        ),
        gallery_stylesheet=settings.gallery_stylesheet_path.read_bytes(),
        detail_stylesheet=settings.detail_stylesheet_path.read_bytes(),
    )


def get_gallery(request: Request) -> GalleryContext:
    """
    Get the gallery context for the running application.
    """
    return request.app.state.gallery


# Type alias for dependency injection
GalleryDep = Annotated[GalleryContext, Depends(get_gallery)]
