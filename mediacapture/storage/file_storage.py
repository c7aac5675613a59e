import uuid
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from mediacapture.storage.exceptions import StorageError, StorageReadError, StorageWriteError


def stored_file_name(original_name: str) -> str:
    """Build a fresh storage name: {uuid4 hex}{original suffix}"""
    suffix = Path(original_name).suffix.lower()
    return f"{uuid.uuid4().hex}{suffix}"


class FileStorage:
    """Persists uploaded bytes on local disk under a single upload directory."""

    def __init__(self, upload_dir: Path | str) -> None:
        self._upload_dir = Path(upload_dir)

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    def save(self, data: bytes, original_name: str) -> str:
        """Write bytes to a fresh path and return it.

        Raises:
            StorageWriteError: if the directory or file cannot be written.
        """
        path = self._upload_dir / stored_file_name(original_name)
        try:
            self._upload_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as exc:
            raise StorageWriteError(f"Failed to write {path}: {exc}") from exc
        return str(path)

    def read_bytes(self, path: str) -> bytes:
        """Read stored bytes.

        Raises:
            StorageReadError: if the file is missing or unreadable.
        """
        try:
            return Path(path).read_bytes()
        except OSError as exc:
            raise StorageReadError(f"Failed to read {path}: {exc}") from exc

    @contextmanager
    def open(self, path: str) -> Generator[BinaryIO, None, None]:
        """Open stored bytes as a binary stream for streaming consumers."""
        try:
            stream = Path(path).open("rb")
        except OSError as exc:
            raise StorageReadError(f"Failed to open {path}: {exc}") from exc
        with stream:
            yield stream

    def delete(self, path: str) -> bool:
        """Remove stored bytes. Returns False if the file was already gone."""
        file_path = Path(path)
        if not file_path.exists():
            return False
        try:
            file_path.unlink()
        except OSError as exc:
            raise StorageError(f"Failed to delete {path}: {exc}") from exc
        return True
