from mediacapture.export.base import BaseDocumentExporter
from mediacapture.logging.logger import Log
from mediacapture.uploads.models import UploadRecord


class MockDocumentExporter(BaseDocumentExporter):
    """Fabricates a document URL from the record id. No network calls.

    A real exporter would create or append to a document through the
    provider's authenticated API and return the resulting URL.
    """

    DEFAULT_BASE_URL = "https://docs.google.com/document/d/"

    def __init__(self, base_url: str = DEFAULT_BASE_URL) -> None:
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"

    def export(self, record: UploadRecord) -> str:
        url = f"{self._base_url}mock-{record.id}"
        Log.info(f"Mock export of upload {record.id} to {url}")
        return url
