import itertools
import threading
from dataclasses import asdict, replace
from datetime import datetime, timezone

from mediacapture.database.repositories.base import BaseUploadRepository
from mediacapture.uploads.models import NewUpload, UploadRecord


class InMemoryUploadRepository(BaseUploadRepository):
    """Dict-backed record store. Contents are lost on restart.

    Every read and write goes through one lock, so an update can never
    write back a record that a concurrent delete already removed.
    """

    def __init__(self) -> None:
        self._records: dict[int, UploadRecord] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create(self, new_upload: NewUpload) -> UploadRecord:
        with self._lock:
            record = UploadRecord(
                id=next(self._ids),
                created_at=datetime.now(timezone.utc),
                **asdict(new_upload),
            )
            self._records[record.id] = record
        return record

    def get(self, upload_id: int) -> UploadRecord | None:
        with self._lock:
            return self._records.get(upload_id)

    def list(self) -> list[UploadRecord]:
        with self._lock:
            records = list(self._records.values())
        return sorted(records, key=lambda r: (r.created_at, r.id), reverse=True)

    def update(self, upload_id: int, **fields: object) -> UploadRecord | None:
        self._check_update_fields(fields)
        with self._lock:
            existing = self._records.get(upload_id)
            if existing is None:
                return None
            updated = replace(existing, **fields)  # type: ignore[arg-type]
            self._records[upload_id] = updated
        return updated

    def delete(self, upload_id: int) -> bool:
        with self._lock:
            return self._records.pop(upload_id, None) is not None
