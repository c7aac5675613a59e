from pathlib import Path
from unittest.mock import patch

import pytest

from mediacapture.storage.exceptions import StorageError, StorageReadError, StorageWriteError
from mediacapture.storage.file_storage import FileStorage, stored_file_name


class TestStoredFileName:
    def test_keeps_lowercased_suffix(self) -> None:
        assert stored_file_name("Voice Memo.MP3").endswith(".mp3")

    def test_names_are_unique(self) -> None:
        assert stored_file_name("a.png") != stored_file_name("a.png")

    def test_handles_missing_suffix(self) -> None:
        name = stored_file_name("blob")
        assert "." not in name


class TestSave:
    def test_writes_bytes_and_returns_path(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path / "uploads")

        path = storage.save(b"hello", "note.txt")

        assert Path(path).parent == tmp_path / "uploads"
        assert Path(path).read_bytes() == b"hello"

    def test_each_save_gets_a_fresh_path(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path)

        first = storage.save(b"1", "same.png")
        second = storage.save(b"2", "same.png")

        assert first != second

    def test_raises_storage_write_error(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path)
        with patch.object(Path, "write_bytes", side_effect=OSError("disk full")):
            with pytest.raises(StorageWriteError, match="disk full"):
                storage.save(b"data", "a.png")


class TestRead:
    def test_read_bytes_round_trip(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path)
        path = storage.save(b"\x00\x01", "raw.bin")

        assert storage.read_bytes(path) == b"\x00\x01"

    def test_read_bytes_raises_when_missing(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path)
        with pytest.raises(StorageReadError, match="missing.png"):
            storage.read_bytes(str(tmp_path / "missing.png"))

    def test_open_yields_stream_and_closes_it(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path)
        path = storage.save(b"audio", "memo.mp3")

        with storage.open(path) as stream:
            assert stream.read() == b"audio"
            assert stream.name.endswith(".mp3")

        assert stream.closed

    def test_open_raises_when_missing(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path)
        with pytest.raises(StorageReadError):
            with storage.open(str(tmp_path / "missing.mp3")):
                pass


class TestDelete:
    def test_removes_file(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path)
        path = storage.save(b"x", "a.png")

        assert storage.delete(path) is True
        assert not Path(path).exists()

    def test_returns_false_when_already_gone(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path)
        assert storage.delete(str(tmp_path / "gone.png")) is False

    def test_wraps_os_errors(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path)
        path = storage.save(b"x", "a.png")
        with patch.object(Path, "unlink", side_effect=PermissionError("read-only")):
            with pytest.raises(StorageError, match="read-only"):
                storage.delete(path)
