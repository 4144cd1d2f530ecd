# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .template_service import TemplateStore
from .catalog_service import CatalogService
from .config_service import ConfigStore
from .page_service import PageBuilder, image_names_to_tags
from .upload_service import UploadService

__all__ = [
    "TemplateStore",
    "CatalogService",
    "ConfigStore",
    "PageBuilder",
    "image_names_to_tags",
    "UploadService",
]
