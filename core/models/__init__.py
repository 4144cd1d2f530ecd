# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - catalog.py: Catalog entry schema (per-image JSON metadata)
# - gallery.py: Gallery config schema (config.json) and settings updates
# - upload.py: Decoded upload request
#
# These models define the "contract" between the HTTP layer, the services
# and the files on disk.
# =============================================================================

from .catalog import CatalogEntry, CatalogList
from .gallery import GalleryConfig, SettingsUpdate
from .upload import UploadRequest

__all__ = [
    # Catalog
    "CatalogEntry",
    "CatalogList",
    # Gallery config
    "GalleryConfig",
    "SettingsUpdate",
    # Upload
    "UploadRequest",
]
