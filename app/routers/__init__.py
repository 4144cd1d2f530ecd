# =============================================================================
# app/routers/ - HTTP Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - settings.py: Gallery config read/update endpoints
# - catalog.py: Catalog entry listing
# - static.py: Stylesheets
# - gallery.py: Gallery page
# - upload.py: Image uploads
# - detail.py: Per-image detail pages
# - images.py: Raw image bytes (catch-all, mounted last)
#
# Each router is mounted in main.py; mount order matters for the catch-all.
# =============================================================================

from . import health
from . import settings
from . import catalog
from . import static
from . import gallery
from . import upload
from . import detail
from . import images

__all__ = [
    "health",
    "settings",
    "catalog",
    "static",
    "gallery",
    "upload",
    "detail",
    "images",
]
