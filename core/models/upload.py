# =============================================================================
# core/models/upload.py - Upload Schemas
# =============================================================================
# UploadRequest is the structured form of a decoded multipart upload body.
# Fields are optional here because presence is checked by UploadService,
# which reports each missing field with its own message.
# =============================================================================

from pydantic import BaseModel, Field


class UploadRequest(BaseModel):
    """A decoded gallery upload: one image file plus its metadata fields."""

    filename: str | None = Field(
        default=None,
        description="Client-supplied filename of the uploaded image"
    )

    data: bytes = Field(
        default=b"",
        description="Raw image bytes"
    )

    title: str | None = Field(
        default=None,
        description="Title for the catalog entry"
    )

    description: str | None = Field(
        default=None,
        description="Description for the catalog entry"
    )
