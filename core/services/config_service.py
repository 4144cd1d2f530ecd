# =============================================================================
# core/services/config_service.py - Gallery Config Store
# =============================================================================
# Owns config.json and its in-memory copy. All writes go through one lock,
# so concurrent title updates are applied one at a time and the file always
# holds the last complete write.
# =============================================================================

import json
import logging
import threading
from pathlib import Path

from app.exceptions import ConfigWriteError
from core.models.gallery import GalleryConfig
from lib.utils import atomic_write_json

logger = logging.getLogger(__name__)


class ConfigStore:
    """
    Single writer for the persisted gallery config.
    """

    def __init__(self, path: Path, default_title: str = "Gallery"):
        self.path = Path(path)
        self._config = GalleryConfig(title=default_title)
        self._lock = threading.Lock()

    @property
    def config(self) -> GalleryConfig:
        return self._config

    @property
    def title(self) -> str:
        return self._config.title

    def load(self) -> GalleryConfig:
        """
        Read config.json into memory.

        A missing file keeps the default config; it is created on the first
        update.

        Raises:
            ValueError: If the file exists but is not a valid config document
        """
        if not self.path.exists():
            logger.info(f"No config at {self.path}, using title {self._config.title!r}")
            return self._config

        data = json.loads(self.path.read_text(encoding="utf-8"))
        self._config = GalleryConfig.model_validate(data)
        logger.info(f"Loaded config from {self.path}: title={self._config.title!r}")
        return self._config

    def update_title(self, title: str) -> GalleryConfig:
        """
        Set the gallery title and persist it.

        The file is written before the in-memory copy changes, so a failed
        write leaves both untouched.

        Args:
            title: New title

        Returns:
            The updated config

        Raises:
            ConfigWriteError: If config.json cannot be written
        """
        with self._lock:
            updated = self._config.model_copy(update={"title": title})
            try:
                atomic_write_json(self.path, updated.model_dump())
            except OSError as e:
                logger.error(f"Failed to write {self.path}: {e}")
                raise ConfigWriteError(str(e))

            self._config = updated

        logger.info(f"Gallery title set to {title!r}")
        return updated
