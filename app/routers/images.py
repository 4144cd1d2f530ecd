# =============================================================================
# app/routers/images.py - Image File Endpoints
# =============================================================================
# Catch-all route: any GET path not claimed by another router names an image
# under images/. Must be mounted last.
#
# Files are served from the gallery's own origin, so a type that browsers
# can run scripts from (SVG, HTML, XML) is sent inside a CSP sandbox.
# =============================================================================

import logging
import mimetypes

from fastapi import APIRouter, Response

from app.dependencies import GalleryDep

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_MEDIA_TYPE = "application/octet-stream"

ACTIVE_MEDIA_TYPES = {
    "image/svg+xml",
    "text/html",
    "application/xhtml+xml",
    "text/xml",
    "application/xml",
}


def image_headers(media_type: str) -> dict[str, str]:
    """Response headers for serving a file of the given media type."""
    headers = {"X-Content-Type-Options": "nosniff"}
    if media_type in ACTIVE_MEDIA_TYPES:
        headers["Content-Security-Policy"] = "sandbox"
    return headers


@router.get("/{image_path:path}")
def serve_image(image_path: str, gallery: GalleryDep):
    """
    Serve the bytes of images/<image_path>.

    The path arrives percent-decoded. Returns 404 if the file is absent
    or hidden.
    """
    data = gallery.catalog.read_image(image_path)
    media_type = mimetypes.guess_type(image_path)[0] or DEFAULT_MEDIA_TYPE
    return Response(content=data, media_type=media_type, headers=image_headers(media_type))
