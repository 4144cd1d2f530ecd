# =============================================================================
# app/routers/upload.py - Image Upload Endpoints
# =============================================================================
# Accepts multipart uploads that add an image and its catalog entry to the
# gallery. Expected form fields:
# - image: the image file
# - title: catalog title
# - description: catalog description
# =============================================================================

import logging

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse
from starlette.datastructures import UploadFile

from app.dependencies import GalleryDep
from core.models.upload import UploadRequest

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Helper Functions
# =============================================================================

async def parse_upload(request: Request) -> UploadRequest:
    """
    Decode a multipart body into an UploadRequest.

    A file field without a filename (an empty file input) counts as no file.
    Non-multipart bodies decode to an empty request.
    """
    async with request.form() as form:
        image = form.get("image")
        title = form.get("title")
        description = form.get("description")

        filename = None
        data = b""
        if isinstance(image, UploadFile) and image.filename:
            filename = image.filename
            data = await image.read()

    return UploadRequest(
        filename=filename,
        data=data,
        title=title if isinstance(title, str) else None,
        description=description if isinstance(description, str) else None,
    )


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/", response_class=HTMLResponse)
@router.post("/gallery", response_class=HTMLResponse)
async def upload_image(request: Request, gallery: GalleryDep):
    """
    Upload an image with its title and description.

    This endpoint:
    1. Decodes the multipart body
    2. Validates the file and metadata fields
    3. Writes the image and its catalog entry (all-or-nothing)
    4. Returns the updated gallery page
    """
    upload = await parse_upload(request)

    logger.info(f"Processing upload: {upload.filename} ({len(upload.data)} bytes)")

    await run_in_threadpool(gallery.uploads.save, upload)

    image_names = await run_in_threadpool(gallery.catalog.get_image_names)
    return HTMLResponse(gallery.pages.build_gallery(image_names))
