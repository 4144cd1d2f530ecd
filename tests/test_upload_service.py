# =============================================================================
# tests/test_upload_service.py - Upload Pipeline Tests
# =============================================================================
# Tests for UploadService validation and all-or-nothing writes.
# =============================================================================

import json
import threading
from unittest.mock import patch

import pytest

from app.exceptions import (
    DuplicateImageError,
    FileTooLargeError,
    InvalidFilenameError,
    InvalidFileTypeError,
    MissingUploadFieldError,
    StorageWriteError,
)
from core.models.upload import UploadRequest
from core.services.upload_service import UploadService
from lib.utils import atomic_write_bytes


@pytest.fixture
def uploads(gallery_root):
    return UploadService(
        gallery_root / "images",
        gallery_root / "catalog",
        allowed_extensions=[".png", ".jpg"],
        max_upload_size_bytes=1024,
    )


def make_upload(**overrides) -> UploadRequest:
    fields = {
        "filename": "moon.png",
        "data": b"\x89PNG moon",
        "title": "Moon",
        "description": "Full moon",
    }
    fields.update(overrides)
    return UploadRequest(**fields)


# =============================================================================
# Validation Tests
# =============================================================================

class TestValidate:
    """Tests for UploadService.validate."""

    def test_missing_file(self, uploads):
        with pytest.raises(MissingUploadFieldError) as exc_info:
            uploads.validate(make_upload(filename=None, data=b""))

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "No file specified"

    def test_missing_file_reported_before_title(self, uploads):
        with pytest.raises(MissingUploadFieldError) as exc_info:
            uploads.validate(make_upload(filename=None, title=None))

        assert exc_info.value.message == "No file specified"

    def test_missing_title(self, uploads):
        with pytest.raises(MissingUploadFieldError) as exc_info:
            uploads.validate(make_upload(title=None))

        assert exc_info.value.message == "No title specified"

    def test_blank_title(self, uploads):
        with pytest.raises(MissingUploadFieldError) as exc_info:
            uploads.validate(make_upload(title="   "))

        assert exc_info.value.message == "No title specified"

    def test_missing_description(self, uploads):
        with pytest.raises(MissingUploadFieldError) as exc_info:
            uploads.validate(make_upload(description=None))

        assert exc_info.value.message == "No description specified"

    @pytest.mark.parametrize("filename", ["../evil.png", "sub/dir.png", ".hidden.png"])
    def test_unsafe_filename(self, uploads, filename):
        with pytest.raises(InvalidFilenameError):
            uploads.validate(make_upload(filename=filename))

    def test_disallowed_extension(self, uploads):
        with pytest.raises(InvalidFileTypeError) as exc_info:
            uploads.validate(make_upload(filename="script.html"))

        assert exc_info.value.details["allowed_types"] == [".png", ".jpg"]

    def test_extension_case_insensitive(self, uploads):
        entry = uploads.validate(make_upload(filename="MOON.PNG"))

        assert entry.image_name == "MOON.PNG"

    def test_too_large(self, uploads):
        with pytest.raises(FileTooLargeError) as exc_info:
            uploads.validate(make_upload(data=b"x" * 2048))

        assert exc_info.value.status_code == 413

    def test_builds_entry(self, uploads):
        entry = uploads.validate(make_upload(title="  Moon  "))

        assert entry.image_name == "moon.png"
        assert entry.title == "Moon"
        assert entry.description == "Full moon"


# =============================================================================
# Save Tests
# =============================================================================

class TestSave:
    """Tests for UploadService.save."""

    def test_writes_image_and_catalog_entry(self, uploads, gallery_root):
        uploads.save(make_upload())

        assert (gallery_root / "images" / "moon.png").read_bytes() == b"\x89PNG moon"
        saved = json.loads((gallery_root / "catalog" / "moon.json").read_text(encoding="utf-8"))
        assert saved == {"imageName": "moon.png", "title": "Moon", "description": "Full moon"}

    def test_metadata_with_quotes_is_valid_json(self, uploads, gallery_root):
        uploads.save(make_upload(title='The "Moon"', description='", "injected": "yes'))

        saved = json.loads((gallery_root / "catalog" / "moon.json").read_text(encoding="utf-8"))
        assert saved["title"] == 'The "Moon"'
        assert "injected" not in saved

    def test_existing_image_not_overwritten(self, uploads, gallery_root, png_bytes):
        with pytest.raises(DuplicateImageError) as exc_info:
            uploads.save(make_upload(filename="sunset.png", data=b"other"))

        assert exc_info.value.status_code == 409
        assert (gallery_root / "images" / "sunset.png").read_bytes() == png_bytes

    def test_basename_collision_with_other_extension(self, uploads, gallery_root):
        """Test that beach.png is rejected while beach.jpg exists."""
        with pytest.raises(DuplicateImageError):
            uploads.save(make_upload(filename="beach.png"))

        assert not (gallery_root / "images" / "beach.png").exists()

    def test_basename_collision_with_catalog_entry(self, uploads, gallery_root):
        (gallery_root / "catalog" / "moon.json").write_text("{}")

        with pytest.raises(DuplicateImageError):
            uploads.save(make_upload())

        assert not (gallery_root / "images" / "moon.png").exists()

    def test_image_write_failure(self, uploads, gallery_root):
        with patch("core.services.upload_service.atomic_write_bytes", side_effect=OSError("disk full")):
            with pytest.raises(StorageWriteError) as exc_info:
                uploads.save(make_upload())

        assert exc_info.value.status_code == 500
        assert not (gallery_root / "images" / "moon.png").exists()
        assert not (gallery_root / "catalog" / "moon.json").exists()

    def test_catalog_write_failure_rolls_back_image(self, uploads, gallery_root):
        """Test that a failed catalog write leaves no dangling image."""
        calls = []

        def fail_on_catalog(path, data):
            calls.append(path)
            if path.suffix == ".json":
                raise OSError("disk full")
            atomic_write_bytes(path, data)

        with patch("core.services.upload_service.atomic_write_bytes", side_effect=fail_on_catalog):
            with pytest.raises(StorageWriteError):
                uploads.save(make_upload())

        assert len(calls) == 2
        assert not (gallery_root / "images" / "moon.png").exists()
        assert not (gallery_root / "catalog" / "moon.json").exists()

    def test_concurrent_same_name_uploads(self, uploads, gallery_root):
        """Test that simultaneous saves of one name yield one winner and no mixed pair."""
        payloads = [f"race {i}".encode() for i in range(8)]
        barrier = threading.Barrier(len(payloads))
        saved, rejected = [], []

        def save(data):
            barrier.wait()
            try:
                uploads.save(make_upload(filename="race.png", data=data, title=data.decode()))
                saved.append(data)
            except DuplicateImageError:
                rejected.append(data)

        threads = [threading.Thread(target=save, args=(data,)) for data in payloads]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(saved) == 1
        assert len(rejected) == len(payloads) - 1
        winner = saved[0]
        assert (gallery_root / "images" / "race.png").read_bytes() == winner
        entry = json.loads((gallery_root / "catalog" / "race.json").read_text(encoding="utf-8"))
        assert entry["title"] == winner.decode()
        assert sorted(p.name for p in (gallery_root / "images").iterdir() if p.name.startswith("race")) == [
            "race.png"
        ]
