# =============================================================================
# app/routers/detail.py - Detail Page Endpoints
# =============================================================================
# Serves one image with the title and description from its catalog entry.
# =============================================================================

import logging

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from app.dependencies import GalleryDep
from lib.utils import split_basename

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/detail/{filename}", response_class=HTMLResponse)
def serve_detail(filename: str, gallery: GalleryDep):
    """
    Render the detail page for an image.

    The catalog entry is looked up by the filename with its extension
    stripped: /detail/sunset.png reads catalog/sunset.json.
    """
    entry = gallery.catalog.read_catalog_entry(split_basename(filename))
    return HTMLResponse(gallery.pages.build_detail(filename, entry))
