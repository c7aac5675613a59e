from abc import ABC, abstractmethod

from mediacapture.uploads.models import MUTABLE_FIELDS, NewUpload, UploadRecord


class BaseUploadRepository(ABC):
    """Contract for upload record stores.

    Stores own the canonical copy of every record. Updates are plain merges:
    no cross-field validation, no optimistic locking, last writer wins.
    """

    @abstractmethod
    def create(self, new_upload: NewUpload) -> UploadRecord:
        """Persist a new record, assigning its id and creation timestamp."""

    @abstractmethod
    def get(self, upload_id: int) -> UploadRecord | None:
        """Return the record with this id, or None."""

    @abstractmethod
    def list(self) -> list[UploadRecord]:
        """Return all records, newest first."""

    @abstractmethod
    def update(self, upload_id: int, **fields: object) -> UploadRecord | None:
        """Merge fields into the record. Returns None if it does not exist.

        Raises:
            ValueError: if a field is not one of the mutable record fields.
        """

    @abstractmethod
    def delete(self, upload_id: int) -> bool:
        """Remove the record. Returns True if a record existed."""

    @staticmethod
    def _check_update_fields(fields: dict[str, object]) -> None:
        unknown = set(fields) - MUTABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")
