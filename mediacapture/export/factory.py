from mediacapture.config.settings import Settings
from mediacapture.export.base import BaseDocumentExporter
from mediacapture.export.mock_exporter import MockDocumentExporter


class DocumentExporterFactory:
    """Creates the configured document exporter."""

    @classmethod
    def create(cls, settings: Settings) -> BaseDocumentExporter:
        provider = settings.export_provider.lower()
        if provider == "mock":
            return MockDocumentExporter(base_url=settings.export_base_url)
        raise ValueError(f"Unknown export provider '{provider}'. Choose from: ['mock']")
