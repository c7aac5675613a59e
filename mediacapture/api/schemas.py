from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from mediacapture.uploads.models import ExportResult, UploadRecord


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UploadResponse(CamelModel):
    id: int
    kind: str
    original_name: str
    storage_path: str
    mime_type: str
    size_bytes: int
    processed: bool
    analysis_text: str | None = None
    transcription_text: str | None = None
    exported: bool
    exported_url: str | None = None
    created_at: datetime

    @classmethod
    def from_record(cls, record: UploadRecord) -> "UploadResponse":
        return cls(
            id=record.id,
            kind=record.kind,
            original_name=record.original_name,
            storage_path=record.storage_path,
            mime_type=record.mime_type,
            size_bytes=record.size_bytes,
            processed=record.processed,
            analysis_text=record.analysis_text,
            transcription_text=record.transcription_text,
            exported=record.exported,
            exported_url=record.exported_url,
            created_at=record.created_at,
        )


class ExportResponse(CamelModel):
    success: bool = True
    document_url: str
    upload: UploadResponse

    @classmethod
    def from_result(cls, result: ExportResult) -> "ExportResponse":
        return cls(
            document_url=result.document_url,
            upload=UploadResponse.from_record(result.record),
        )


class DeleteResponse(CamelModel):
    success: bool = True


class ErrorResponse(CamelModel):
    error: str
