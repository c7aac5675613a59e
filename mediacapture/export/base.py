from abc import ABC, abstractmethod

from mediacapture.uploads.models import UploadRecord


class BaseDocumentExporter(ABC):
    """Contract for external document-service clients."""

    @abstractmethod
    def export(self, record: UploadRecord) -> str:
        """Publish a processed record and return the document URL.

        Raises:
            ExternalServiceError: if the document service rejects the export.
        """
