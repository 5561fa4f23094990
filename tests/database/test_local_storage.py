import json
import logging

from database.local_storage import LocalStorage


class TestLocalStorage:
    """Tests for the JSON-file key-value store."""

    def test_get_missing_file_returns_none(self, storage):
        """Test reading before anything was written."""
        assert storage.get_item("anything") is None
        assert not storage.path.exists()

    def test_set_then_get(self, storage):
        """Test that a written value is read back unchanged."""
        storage.set_item("key", "value")

        assert storage.get_item("key") == "value"

    def test_set_creates_parent_folder(self, tmp_path):
        """Test that the data folder is created on first write."""
        storage = LocalStorage(tmp_path / "a" / "b" / "storage.json")

        storage.set_item("k", "v")

        assert storage.path.exists()

    def test_set_overwrites_only_that_key(self, storage):
        """Test that other keys survive a write."""
        storage.set_item("one", "1")
        storage.set_item("two", "2")
        storage.set_item("one", "uno")

        assert storage.get_item("one") == "uno"
        assert storage.get_item("two") == "2"

    def test_no_tmp_file_left_behind(self, storage):
        """Test that the atomic write cleans up its temporary file."""
        storage.set_item("k", "v")

        leftovers = [p.name for p in storage.path.parent.iterdir()]
        assert leftovers == ["storage.json"]

    def test_remove_item(self, storage):
        """Test removing a key."""
        storage.set_item("k", "v")

        storage.remove_item("k")

        assert storage.get_item("k") is None

    def test_remove_missing_item_is_noop(self, storage):
        """Test that removing an absent key does not create the file."""
        storage.remove_item("nope")

        assert not storage.path.exists()

    def test_corrupt_file_reads_as_empty(self, storage, caplog):
        """Test that an unparseable file is treated as empty and logged."""
        storage.path.parent.mkdir(parents=True)
        storage.path.write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="coinkeeper"):
            assert storage.get_item("k") is None

        assert "unreadable" in caplog.text

    def test_non_object_file_reads_as_empty(self, storage):
        """Test that a JSON file not holding an object is treated as empty."""
        storage.path.parent.mkdir(parents=True)
        storage.path.write_text("[1, 2, 3]", encoding="utf-8")

        assert storage.get_item("k") is None

    def test_write_recovers_corrupt_file(self, storage):
        """Test that writing over a corrupt file replaces it with valid JSON."""
        storage.path.parent.mkdir(parents=True)
        storage.path.write_text("garbage", encoding="utf-8")

        storage.set_item("k", "v")

        assert json.loads(storage.path.read_text(encoding="utf-8")) == {"k": "v"}

    def test_non_string_value_reads_as_none(self, storage):
        """Test that only string values are returned."""
        storage.path.parent.mkdir(parents=True)
        storage.path.write_text('{"k": 5}', encoding="utf-8")

        assert storage.get_item("k") is None

    def test_write_failure_is_logged_not_raised(self, tmp_path, caplog):
        """Test that a failed write logs an error and leaves the session running."""
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a folder", encoding="utf-8")
        storage = LocalStorage(blocker / "storage.json")

        with caplog.at_level(logging.ERROR, logger="coinkeeper"):
            storage.set_item("k", "v")

        assert "Could not write storage file" in caplog.text
