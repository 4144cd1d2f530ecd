# =============================================================================
# core/services/upload_service.py - Image Upload Pipeline
# =============================================================================
# Validates an upload and adds it to the gallery as an image file plus its
# catalog entry. The pair is written all-or-nothing:
#
#   1. Validate fields (file, title, description), filename, type and size
#   2. Reject basename collisions with existing images or catalog entries
#   3. Write images/<name> atomically
#   4. Write catalog/<basename>.json atomically; on failure remove the image
#
# Steps 2-4 run under a single lock so two uploads of the same name cannot
# interleave.
# =============================================================================

import logging
import os
import threading
from pathlib import Path

from app.exceptions import (
    DuplicateImageError,
    FileTooLargeError,
    InvalidFilenameError,
    InvalidFileTypeError,
    MissingUploadFieldError,
    StorageWriteError,
)
from core.models.catalog import CatalogEntry
from core.models.upload import UploadRequest
from lib.utils import atomic_write_bytes, is_safe_filename, split_basename

logger = logging.getLogger(__name__)


class UploadService:
    """
    Service for adding uploaded images to the gallery.
    """

    def __init__(
        self,
        images_dir: Path,
        catalog_dir: Path,
        allowed_extensions: list[str],
        max_upload_size_bytes: int,
    ):
        self.images_dir = Path(images_dir)
        self.catalog_dir = Path(catalog_dir)
        self.allowed_extensions = allowed_extensions
        self.max_upload_size_bytes = max_upload_size_bytes
        self._lock = threading.Lock()

    # =========================================================================
    # Validation
    # =========================================================================

    def validate(self, upload: UploadRequest) -> CatalogEntry:
        """
        Check an upload and build its catalog entry.

        Missing fields are reported in a fixed order: file, title, description.

        Returns:
            The catalog entry that will be written for this upload

        Raises:
            MissingUploadFieldError: If the file, title or description is missing
            InvalidFilenameError: If the filename is not a plain name
            InvalidFileTypeError: If the extension is not an allowed image type
            FileTooLargeError: If the payload exceeds the size limit
        """
        if not upload.filename:
            logger.error("No file in upload")
            raise MissingUploadFieldError("file")

        if not upload.title or not upload.title.strip():
            raise MissingUploadFieldError("title")

        if not upload.description or not upload.description.strip():
            raise MissingUploadFieldError("description")

        filename = upload.filename
        if not is_safe_filename(filename):
            raise InvalidFilenameError(filename)

        file_ext = os.path.splitext(filename)[1].lower()
        if file_ext not in self.allowed_extensions:
            raise InvalidFileTypeError(filename, self.allowed_extensions)

        if len(upload.data) > self.max_upload_size_bytes:
            raise FileTooLargeError(
                len(upload.data) / (1024 * 1024),
                self.max_upload_size_bytes // (1024 * 1024),
            )

        return CatalogEntry(
            image_name=filename,
            title=upload.title.strip(),
            description=upload.description.strip(),
        )

    # =========================================================================
    # Writing
    # =========================================================================

    def _has_collision(self, filename: str, basename: str) -> bool:
        if (self.images_dir / filename).exists():
            return True
        if (self.catalog_dir / f"{basename}.json").exists():
            return True

        # Another image may already own this basename under a different extension
        return any(
            split_basename(name) == basename
            for name in os.listdir(self.images_dir)
            if not name.startswith(".")
        )

    def save(self, upload: UploadRequest) -> CatalogEntry:
        """
        Validate an upload and write the image and its catalog entry.

        Args:
            upload: Decoded upload body

        Returns:
            The catalog entry written

        Raises:
            DuplicateImageError: If the basename is already in the gallery
            StorageWriteError: If either file cannot be written
            (plus every error raised by validate())
        """
        entry = self.validate(upload)
        filename = entry.image_name
        basename = split_basename(filename)
        image_path = self.images_dir / filename
        catalog_path = self.catalog_dir / f"{basename}.json"

        with self._lock:
            try:
                if self._has_collision(filename, basename):
                    raise DuplicateImageError(filename, basename)
            except OSError as e:
                logger.error(f"Failed to check for existing images: {e}")
                raise StorageWriteError(str(self.images_dir), str(e))

            try:
                atomic_write_bytes(image_path, upload.data)
            except OSError as e:
                logger.error(f"Failed to write image {image_path}: {e}")
                raise StorageWriteError(str(image_path), str(e))

            try:
                atomic_write_bytes(catalog_path, entry.to_json().encode("utf-8"))
            except OSError as e:
                logger.error(f"Failed to write catalog entry {catalog_path}: {e}")
                try:
                    image_path.unlink()
                except OSError as cleanup_error:
                    logger.error(f"Failed to remove image {image_path} after catalog failure: {cleanup_error}")
                raise StorageWriteError(str(catalog_path), str(e))

        logger.info(f"Uploaded image: {filename} ({len(upload.data)} bytes)")
        return entry
