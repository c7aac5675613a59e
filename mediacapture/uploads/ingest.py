from mediacapture.database.repositories.base import BaseUploadRepository
from mediacapture.logging.logger import Log
from mediacapture.storage.file_storage import FileStorage
from mediacapture.uploads.exceptions import InvalidInputError
from mediacapture.uploads.models import VALID_KINDS, NewUpload, UploadRecord
from mediacapture.worker.worker import BaseWorker


def validate_upload(kind: str | None, size_bytes: int, max_size_bytes: dict[str, int]) -> str:
    """Check declared kind and size against the per-kind ceilings.

    Returns the kind. Raises InvalidInputError before anything is written.
    """
    if not kind or kind not in VALID_KINDS:
        raise InvalidInputError("Invalid file type")
    if size_bytes <= 0:
        raise InvalidInputError("No file uploaded")
    limit = max_size_bytes[kind]
    if size_bytes > limit:
        raise InvalidInputError(
            f"File too large for {kind}: {size_bytes} bytes (max {limit})"
        )
    return kind


class UploadIngest:
    """Stores an uploaded file, creates its record and queues processing."""

    def __init__(
        self,
        repo: BaseUploadRepository,
        storage: FileStorage,
        worker: BaseWorker,
        max_size_bytes: dict[str, int],
    ) -> None:
        self._repo = repo
        self._storage = storage
        self._worker = worker
        self._max_size_bytes = max_size_bytes

    def ingest(
        self,
        data: bytes,
        *,
        kind: str | None,
        filename: str,
        content_type: str,
    ) -> UploadRecord:
        """Persist the upload and return its unprocessed record.

        Raises:
            InvalidInputError: on an unknown kind, empty file or oversize file.
            StorageWriteError: if the bytes cannot be saved; no record is created.
        """
        kind = validate_upload(kind, len(data), self._max_size_bytes)
        storage_path = self._storage.save(data, filename)
        record = self._repo.create(
            NewUpload(
                kind=kind,
                original_name=filename,
                storage_path=storage_path,
                mime_type=content_type,
                size_bytes=len(data),
            )
        )
        Log.info(f"Stored {kind} upload {record.id} ({record.size_bytes} bytes) at {storage_path}")

        # Fire-and-forget: the caller polls the record for the outcome.
        _ = self._worker.submit(record.id)
        return record
