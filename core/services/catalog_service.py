# =============================================================================
# core/services/catalog_service.py - Image and Catalog Accessors
# =============================================================================
# Read-side access to the two gallery directories:
# - images/: binary image files, served verbatim
# - catalog/: per-image JSON metadata, paired with images by basename
#
# Listings keep the order the filesystem returns; nothing is sorted or
# filtered by extension. Dotfiles are skipped because uploads stage their
# temporary files as dotfiles in the same directory.
# =============================================================================

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from app.exceptions import CatalogEntryError, GalleryReadError, ImageNotFoundError
from core.models.catalog import CatalogEntry
from lib.utils import is_subpath

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Service for reading images and catalog entries from disk.
    """

    def __init__(self, images_dir: Path, catalog_dir: Path):
        self.images_dir = Path(images_dir)
        self.catalog_dir = Path(catalog_dir)

    # -------------------------------------------------------------------------
    # Listings
    # -------------------------------------------------------------------------

    @staticmethod
    def _list_files(directory: Path) -> list[str]:
        try:
            names = os.listdir(directory)
        except OSError as e:
            logger.error(f"Failed to list {directory}: {e}")
            raise GalleryReadError(str(directory), str(e))

        return [
            name for name in names
            if not name.startswith(".") and (directory / name).is_file()
        ]

    def get_image_names(self) -> list[str]:
        """
        List the filenames in the images directory.

        Raises:
            GalleryReadError: If the directory cannot be listed
        """
        return self._list_files(self.images_dir)

    def get_catalog_names(self) -> list[str]:
        """
        List the filenames in the catalog directory.

        Raises:
            GalleryReadError: If the directory cannot be listed
        """
        return self._list_files(self.catalog_dir)

    # -------------------------------------------------------------------------
    # Catalog Entries
    # -------------------------------------------------------------------------

    def catalog_path(self, basename: str) -> Path:
        return self.catalog_dir / f"{basename}.json"

    def read_catalog_entry(self, basename: str) -> CatalogEntry:
        """
        Read and validate catalog/<basename>.json.

        Args:
            basename: Image filename without its extension

        Returns:
            The parsed catalog entry

        Raises:
            CatalogEntryError: If the file is missing, unreadable or not a valid entry
        """
        path = self.catalog_path(basename)

        if not is_subpath(path, self.catalog_dir):
            raise CatalogEntryError(basename, "Path escapes the catalog directory")

        try:
            raw = path.read_text(encoding="utf-8")
            return CatalogEntry.model_validate(json.loads(raw))
        except (OSError, ValueError, ValidationError) as e:
            logger.error(f"Failed to read catalog entry {path}: {e}")
            raise CatalogEntryError(basename, str(e))

    def list_catalog(self) -> list[CatalogEntry]:
        """
        Read every catalog entry that parses.

        Entries that fail to parse are logged and skipped.
        """
        entries = []
        for name in self.get_catalog_names():
            if not name.endswith(".json"):
                continue
            try:
                entries.append(self.read_catalog_entry(name[: -len(".json")]))
            except CatalogEntryError:
                continue
        return entries

    # -------------------------------------------------------------------------
    # Images
    # -------------------------------------------------------------------------

    def image_path(self, filename: str) -> Path:
        return self.images_dir / filename

    def read_image(self, filename: str) -> bytes:
        """
        Read the bytes of images/<filename>.

        Args:
            filename: Percent-decoded image filename, possibly with subpath

        Returns:
            File contents

        Raises:
            ImageNotFoundError: If the file does not exist, is hidden, or lies
                outside images/
        """
        path = self.image_path(filename)

        if not is_subpath(path, self.images_dir):
            logger.warning(f"Blocked image path outside images directory: {filename}")
            raise ImageNotFoundError(filename)

        # Hidden names are never listed, so they are never served either
        if any(part.startswith(".") for part in Path(filename).parts):
            logger.info(f"Refusing hidden image path: {filename}")
            raise ImageNotFoundError(filename)

        try:
            return path.read_bytes()
        except OSError as e:
            logger.info(f"Image not found: {filename} ({e})")
            raise ImageNotFoundError(filename)
