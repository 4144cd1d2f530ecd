# =============================================================================
# core/models/catalog.py - Catalog Entry Schemas
# =============================================================================
# A catalog entry is the JSON metadata file paired with an image by basename:
#
#   images/sunset.png  <->  catalog/sunset.json
#
# On disk the keys are camelCase ({"imageName", "title", "description"});
# in Python the fields are snake_case. Entries written by older versions of
# the gallery may lack fields or carry extra keys, so every field has a
# default and unknown keys are ignored.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class CatalogEntry(BaseModel):
    """
    Metadata for one image.

    Example (as stored in catalog/sunset.json):
        {
            "imageName": "sunset.png",
            "title": "Sunset",
            "description": "Over the bay"
        }
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Filename of the image this entry describes (including extension)
    image_name: str = Field(
        default="",
        alias="imageName",
        description="Filename of the matching image"
    )

    title: str = Field(
        default="",
        description="Human-readable image title"
    )

    description: str = Field(
        default="",
        description="Free-text image description"
    )

    def to_json(self) -> str:
        """Serialize with the on-disk camelCase keys."""
        return self.model_dump_json(by_alias=True)


class CatalogList(BaseModel):
    """
    Schema for listing catalog entries.

    Returned by GET /api/v1/catalog.
    """

    entries: list[CatalogEntry] = Field(
        default_factory=list,
        description="All readable catalog entries"
    )

    total: int = Field(
        default=0,
        ge=0,
        description="Number of entries returned"
    )
