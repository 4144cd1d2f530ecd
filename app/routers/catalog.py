# =============================================================================
# app/routers/catalog.py - Catalog Listing Endpoints
# =============================================================================
# JSON view of every readable catalog entry.
# =============================================================================

from fastapi import APIRouter

from app.dependencies import GalleryDep
from core.models.catalog import CatalogList

router = APIRouter()


@router.get("/catalog", response_model=CatalogList, response_model_by_alias=True)
def list_catalog(gallery: GalleryDep):
    """
    List all catalog entries.

    Entries that fail to parse are skipped.
    """
    entries = gallery.catalog.list_catalog()
    return CatalogList(entries=entries, total=len(entries))
