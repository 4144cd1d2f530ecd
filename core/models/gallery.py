# =============================================================================
# core/models/gallery.py - Gallery Config Schemas
# =============================================================================
# The gallery config is the small JSON document persisted as config.json:
#
#   {"title": "My Gallery"}
#
# It is read once at startup and rewritten on every change.
# =============================================================================

from pydantic import BaseModel, Field


class GalleryConfig(BaseModel):
    """Persisted gallery configuration."""

    title: str = Field(
        default="Gallery",
        description="Title shown on the gallery page"
    )


class SettingsUpdate(BaseModel):
    """
    Schema for updating the gallery config.

    Example:
        {
            "title": "Summer 2024"
        }
    """

    title: str = Field(
        ...,
        max_length=200,
        description="New gallery title"
    )
