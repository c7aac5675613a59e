from unittest.mock import MagicMock

import pytest

from mediacapture.config.settings import Settings
from mediacapture.database.repositories.memory_upload_repository import (
    InMemoryUploadRepository,
)
from mediacapture.export.base import BaseDocumentExporter
from mediacapture.export.factory import DocumentExporterFactory
from mediacapture.export.mock_exporter import MockDocumentExporter
from mediacapture.uploads.exceptions import PreconditionFailedError, UploadNotFoundError
from mediacapture.uploads.export import ExportService
from mediacapture.uploads.models import NewUpload, UploadRecord


def _create(repo: InMemoryUploadRepository, processed: bool) -> UploadRecord:
    record = repo.create(
        NewUpload(
            kind="image",
            original_name="a.png",
            storage_path="/uploads/a.png",
            mime_type="image/png",
            size_bytes=10,
        )
    )
    if processed:
        record = repo.update(record.id, analysis_text="analysis", processed=True)
    return record


class TestMockDocumentExporter:
    def test_url_derived_from_record_id(self) -> None:
        record = MagicMock(id=12)
        assert MockDocumentExporter().export(record) == "https://docs.google.com/document/d/mock-12"

    def test_custom_base_url_gets_trailing_slash(self) -> None:
        record = MagicMock(id=3)
        exporter = MockDocumentExporter(base_url="https://docs.example.com/d")
        assert exporter.export(record) == "https://docs.example.com/d/mock-3"


class TestDocumentExporterFactory:
    def test_creates_mock_exporter(self) -> None:
        exporter = DocumentExporterFactory.create(Settings(export_provider="mock"))
        assert isinstance(exporter, MockDocumentExporter)

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown export provider"):
            DocumentExporterFactory.create(Settings(export_provider="dropbox"))


class TestExportService:
    def test_exports_processed_record(self) -> None:
        repo = InMemoryUploadRepository()
        record = _create(repo, processed=True)
        service = ExportService(repo, MockDocumentExporter())

        result = service.export(record.id)

        expected_url = f"https://docs.google.com/document/d/mock-{record.id}"
        assert result.document_url == expected_url
        assert result.record.exported is True
        assert result.record.exported_url == expected_url
        assert repo.get(record.id).exported is True

    def test_unprocessed_record_is_rejected(self) -> None:
        repo = InMemoryUploadRepository()
        record = _create(repo, processed=False)
        exporter = MagicMock(spec=BaseDocumentExporter)
        service = ExportService(repo, exporter)

        with pytest.raises(PreconditionFailedError, match="processed first"):
            service.export(record.id)

        assert repo.get(record.id).exported is False
        exporter.export.assert_not_called()

    def test_missing_record_raises_not_found(self) -> None:
        service = ExportService(InMemoryUploadRepository(), MockDocumentExporter())
        with pytest.raises(UploadNotFoundError):
            service.export(1)

    def test_second_export_restamps_url(self) -> None:
        repo = InMemoryUploadRepository()
        record = _create(repo, processed=True)
        exporter = MagicMock(spec=BaseDocumentExporter)
        exporter.export.side_effect = ["https://docs/first", "https://docs/second"]
        service = ExportService(repo, exporter)

        first = service.export(record.id)
        second = service.export(record.id)

        assert first.document_url == "https://docs/first"
        assert second.document_url == "https://docs/second"
        assert repo.get(record.id).exported_url == "https://docs/second"
