from mediacapture.database.repositories.base import BaseUploadRepository
from mediacapture.export.base import BaseDocumentExporter
from mediacapture.logging.logger import Log
from mediacapture.uploads.exceptions import PreconditionFailedError, UploadNotFoundError
from mediacapture.uploads.models import ExportResult


class ExportService:
    """Publishes processed uploads through the configured document exporter.

    Repeated exports are allowed and re-stamp the document URL.
    """

    def __init__(self, repo: BaseUploadRepository, exporter: BaseDocumentExporter) -> None:
        self._repo = repo
        self._exporter = exporter

    def export(self, upload_id: int) -> ExportResult:
        """Export one upload.

        Raises:
            UploadNotFoundError: if the record does not exist.
            PreconditionFailedError: if the record has not been processed yet.
        """
        record = self._repo.get(upload_id)
        if record is None:
            raise UploadNotFoundError("Upload not found")
        if not record.processed:
            raise PreconditionFailedError("File must be processed first")

        document_url = self._exporter.export(record)
        updated = self._repo.update(upload_id, exported=True, exported_url=document_url)
        if updated is None:
            raise UploadNotFoundError("Upload not found")
        Log.info(f"Upload {upload_id} exported to {document_url}")
        return ExportResult(record=updated, document_url=document_url)
