# =============================================================================
# app/routers/static.py - Stylesheet Endpoints
# =============================================================================
# Serves the two stylesheets loaded at startup, byte-for-byte.
# Must be mounted before the detail and image routers, which would otherwise
# claim these paths.
# =============================================================================

from fastapi import APIRouter, Response

from app.dependencies import GalleryDep

router = APIRouter()


@router.get("/gallery.css")
def gallery_stylesheet(gallery: GalleryDep):
    return Response(content=gallery.gallery_stylesheet, media_type="text/css")


@router.get("/details.css")
@router.get("/detail/details.css")
def detail_stylesheet(gallery: GalleryDep):
    return Response(content=gallery.detail_stylesheet, media_type="text/css")
