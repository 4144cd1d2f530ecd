# =============================================================================
# tests/test_config_store.py - Gallery Config Store Tests
# =============================================================================
# Tests for loading config.json and the guarded title update.
# =============================================================================

import json
import threading
from unittest.mock import patch

import pytest

from app.exceptions import ConfigWriteError
from core.services.config_service import ConfigStore


class TestLoad:
    """Tests for ConfigStore.load."""

    def test_reads_title(self, gallery_root):
        store = ConfigStore(gallery_root / "config.json")

        store.load()

        assert store.title == "Test Gallery"

    def test_missing_file_keeps_default(self, tmp_path):
        store = ConfigStore(tmp_path / "config.json", default_title="Fresh")

        store.load()

        assert store.title == "Fresh"
        assert not (tmp_path / "config.json").exists()

    def test_invalid_file_raises(self, tmp_path):
        (tmp_path / "config.json").write_text("{ nope")

        with pytest.raises(ValueError):
            ConfigStore(tmp_path / "config.json").load()


class TestUpdateTitle:
    """Tests for ConfigStore.update_title."""

    def test_updates_memory_and_file(self, gallery_root):
        store = ConfigStore(gallery_root / "config.json")
        store.load()

        store.update_title("My Gallery")

        assert store.title == "My Gallery"
        saved = json.loads((gallery_root / "config.json").read_text(encoding="utf-8"))
        assert saved == {"title": "My Gallery"}

    def test_survives_reload(self, gallery_root):
        ConfigStore(gallery_root / "config.json").update_title("Persisted")

        reloaded = ConfigStore(gallery_root / "config.json")
        reloaded.load()

        assert reloaded.title == "Persisted"

    def test_failed_write_changes_nothing(self, gallery_root):
        store = ConfigStore(gallery_root / "config.json")
        store.load()

        with patch("core.services.config_service.atomic_write_json", side_effect=OSError("read-only")):
            with pytest.raises(ConfigWriteError) as exc_info:
                store.update_title("Never")

        assert exc_info.value.status_code == 500
        assert store.title == "Test Gallery"
        saved = json.loads((gallery_root / "config.json").read_text(encoding="utf-8"))
        assert saved == {"title": "Test Gallery"}

    def test_concurrent_updates_leave_consistent_file(self, gallery_root):
        """Test that the file always matches the last applied update."""
        store = ConfigStore(gallery_root / "config.json")
        store.load()

        threads = [
            threading.Thread(target=store.update_title, args=(f"Title {i}",))
            for i in range(20)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        saved = json.loads((gallery_root / "config.json").read_text(encoding="utf-8"))
        assert saved == {"title": store.title}
        assert store.title.startswith("Title ")
