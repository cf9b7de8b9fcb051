"""Тесты постоянного хранилища"""

import pytest

from pikks_client.core.exceptions import StorageError
from pikks_client.core.storage import FileStorage, MemoryStorage


class TestMemoryStorage:
    def test_set_get_remove(self):
        storage = MemoryStorage()
        storage.set_item("k", "v")
        assert storage.get_item("k") == "v"

        storage.remove_item("k")
        storage.remove_item("k")
        assert storage.get_item("k") is None

    def test_initial_items_are_copied(self):
        initial = {"k": "v"}
        storage = MemoryStorage(initial)
        storage.remove_item("k")
        assert initial == {"k": "v"}


class TestFileStorage:
    def test_missing_key(self, tmp_path):
        assert FileStorage(tmp_path).get_item("auth") is None

    def test_creates_directory_on_write(self, tmp_path):
        directory = tmp_path / "nested" / "dir"
        storage = FileStorage(directory)

        storage.set_item("auth", '{"a": 1}')

        assert (directory / "auth.json").read_text(encoding="utf-8") == '{"a": 1}'
        assert storage.get_item("auth") == '{"a": 1}'

    def test_overwrite_leaves_no_temp_files(self, tmp_path):
        storage = FileStorage(tmp_path)
        storage.set_item("auth", "first")
        storage.set_item("auth", "second")

        assert storage.get_item("auth") == "second"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["auth.json"]

    def test_remove_is_idempotent(self, tmp_path):
        storage = FileStorage(tmp_path)
        storage.set_item("auth", "x")

        storage.remove_item("auth")
        storage.remove_item("auth")

        assert storage.get_item("auth") is None

    def test_write_failure_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(StorageError):
            FileStorage(blocker).set_item("auth", "x")

    def test_read_failure_raises_storage_error(self, tmp_path):
        (tmp_path / "auth.json").mkdir()

        with pytest.raises(StorageError):
            FileStorage(tmp_path).get_item("auth")

    def test_undecodable_content_raises_storage_error(self, tmp_path):
        (tmp_path / "auth.json").write_bytes(b"\xff\xfe\x00garbage")

        with pytest.raises(StorageError):
            FileStorage(tmp_path).get_item("auth")
