from mediacapture.database.repositories.base import BaseUploadRepository
from mediacapture.logging.logger import Log
from mediacapture.storage.exceptions import StorageError
from mediacapture.storage.file_storage import FileStorage
from mediacapture.uploads.exceptions import UploadNotFoundError


class UploadDeleter:
    """Removes an upload's stored bytes and its record."""

    def __init__(self, repo: BaseUploadRepository, storage: FileStorage) -> None:
        self._repo = repo
        self._storage = storage

    def delete(self, upload_id: int) -> bool:
        """Delete bytes best-effort, then the record.

        Returns the result of the record removal only.

        Raises:
            UploadNotFoundError: if the record does not exist.
        """
        record = self._repo.get(upload_id)
        if record is None:
            raise UploadNotFoundError("Upload not found")

        try:
            if not self._storage.delete(record.storage_path):
                Log.warning(f"Stored file for upload {upload_id} was already gone")
        except StorageError as exc:
            Log.warning(f"Could not delete stored file for upload {upload_id}: {exc}")

        deleted = self._repo.delete(upload_id)
        if deleted:
            Log.info(f"Upload {upload_id} deleted")
        return deleted
