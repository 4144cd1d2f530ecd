# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.images_dir)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Note: the gallery title is NOT a setting. It lives in config.json under the
# gallery root and is managed at runtime by core.services.ConfigStore.
# =============================================================================

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Gallery Layout
    # -------------------------------------------------------------------------
    # Everything the server reads or writes lives under this directory:
    # config.json, gallery.css, details.css, templates/, images/, catalog/

    GALLERY_ROOT: Path = Field(
        default=Path("."),
        description="Directory holding config, stylesheets, templates, images and catalog"
    )

    DEFAULT_TITLE: str = Field(
        default="Gallery",
        description="Title used when config.json does not exist yet"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )

    API_PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the server"
    )

    # -------------------------------------------------------------------------
    # File Upload Settings
    # -------------------------------------------------------------------------

    MAX_UPLOAD_SIZE_MB: int = Field(
        default=20,
        ge=1,
        le=500,
        description="Maximum image upload size in MB"
    )

    ALLOWED_EXTENSIONS: str = Field(
        default=".jpg,.jpeg,.png,.gif,.webp,.bmp,.tif,.tiff,.avif",
        description="Allowed image extensions for uploads (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def images_dir(self) -> Path:
        """Directory holding the image files."""
        return self.GALLERY_ROOT / "images"

    @property
    def catalog_dir(self) -> Path:
        """Directory holding the per-image JSON catalog entries."""
        return self.GALLERY_ROOT / "catalog"

    @property
    def templates_dir(self) -> Path:
        return self.GALLERY_ROOT / "templates"

    @property
    def config_path(self) -> Path:
        return self.GALLERY_ROOT / "config.json"

    @property
    def gallery_stylesheet_path(self) -> Path:
        return self.GALLERY_ROOT / "gallery.css"

    @property
    def detail_stylesheet_path(self) -> Path:
        return self.GALLERY_ROOT / "details.css"

    @property
    def allowed_extensions_list(self) -> list[str]:
        """
        Parse ALLOWED_EXTENSIONS string into a list.

        Example: ".png, .JPG" -> [".png", ".jpg"]
        """
        return [ext.strip().lower() for ext in self.ALLOWED_EXTENSIONS.split(",") if ext.strip()]

    @property
    def max_upload_size_bytes(self) -> int:
        """
        Convert MB to bytes for file size validation.
        """
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    @property
    def is_production(self) -> bool:
        """Check if running in production mode (API docs are not served)."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
