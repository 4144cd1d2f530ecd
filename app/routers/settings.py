# =============================================================================
# app/routers/settings.py - Gallery Settings Endpoints
# =============================================================================
# Explicit read/update of the persisted gallery config (config.json).
# The legacy ?title= query parameter handled in app.main goes through the
# same ConfigStore, so both paths share one writer.
# =============================================================================

import logging

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool

from app.dependencies import GalleryDep
from core.models.gallery import GalleryConfig, SettingsUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/settings", response_model=GalleryConfig)
async def read_settings(gallery: GalleryDep):
    """Return the current gallery config."""
    return gallery.config_store.config


@router.put("/settings", response_model=GalleryConfig)
async def update_settings(update: SettingsUpdate, gallery: GalleryDep):
    """
    Update the gallery title.

    The new title is written to config.json before it takes effect.
    """
    return await run_in_threadpool(gallery.config_store.update_title, update.title)
