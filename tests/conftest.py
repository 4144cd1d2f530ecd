# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Builds a throwaway gallery root (templates, stylesheets, config, images,
#   catalog) in a temporary directory for every test
# - Provides a TestClient bound to an app serving that gallery root
# =============================================================================

import json
import os
from pathlib import Path

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

PROJECT_ROOT = Path(__file__).resolve().parent.parent

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + bytes(range(64))
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"JFIF\x00" + bytes(range(64, 128))


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def gallery_root(tmp_path):
    """
    A gallery root with the project's real templates and stylesheets.

    Contents:
        config.json          {"title": "Test Gallery"}
        images/sunset.png    PNG_BYTES
        images/beach.jpg     JPEG_BYTES
        catalog/sunset.json  entry for sunset.png
    """
    root = tmp_path / "gallery"
    (root / "templates").mkdir(parents=True)
    (root / "images").mkdir()
    (root / "catalog").mkdir()

    for name in ("gallery.html", "detail.html"):
        source = (PROJECT_ROOT / "templates" / name).read_text(encoding="utf-8")
        (root / "templates" / name).write_text(source, encoding="utf-8")

    for name in ("gallery.css", "details.css"):
        (root / name).write_bytes((PROJECT_ROOT / name).read_bytes())

    (root / "config.json").write_text(json.dumps({"title": "Test Gallery"}), encoding="utf-8")

    (root / "images" / "sunset.png").write_bytes(PNG_BYTES)
    (root / "images" / "beach.jpg").write_bytes(JPEG_BYTES)

    (root / "catalog" / "sunset.json").write_text(
        json.dumps({
            "imageName": "sunset.png",
            "title": "Sunset",
            "description": "Over the bay",
        }),
        encoding="utf-8",
    )

    return root


@pytest.fixture
def test_settings(gallery_root):
    """Settings pointing at the temporary gallery root."""
    return Settings(GALLERY_ROOT=gallery_root)


@pytest.fixture
def client(test_settings):
    """TestClient with the application lifespan running."""
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client


@pytest.fixture
def png_bytes():
    return PNG_BYTES
