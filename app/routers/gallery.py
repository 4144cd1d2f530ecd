# =============================================================================
# app/routers/gallery.py - Gallery Page Endpoints
# =============================================================================
# Serves the gallery page: every image in images/, linked to its detail page.
# =============================================================================

import logging

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from app.dependencies import GalleryDep

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
@router.get("/gallery", response_class=HTMLResponse)
def serve_gallery(gallery: GalleryDep):
    """
    Render the gallery page.

    Images appear in directory-listing order.
    """
    image_names = gallery.catalog.get_image_names()
    return HTMLResponse(gallery.pages.build_gallery(image_names))
