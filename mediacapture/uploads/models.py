from dataclasses import dataclass
from datetime import datetime

KIND_IMAGE = "image"
KIND_AUDIO = "audio"
KIND_DOCUMENT = "document"

VALID_KINDS = frozenset({KIND_IMAGE, KIND_AUDIO, KIND_DOCUMENT})


@dataclass(frozen=True)
class NewUpload:
    """Fields supplied when an upload record is created."""

    kind: str
    original_name: str
    storage_path: str
    mime_type: str
    size_bytes: int
    processed: bool = False
    analysis_text: str | None = None
    transcription_text: str | None = None
    exported: bool = False
    exported_url: str | None = None


@dataclass(frozen=True)
class UploadRecord:
    """One uploaded file and its processing state.

    Instances are snapshots. The record store replaces its canonical copy on
    every update, so holders never observe later changes.
    """

    id: int
    kind: str
    original_name: str
    storage_path: str
    mime_type: str
    size_bytes: int
    created_at: datetime
    processed: bool = False
    analysis_text: str | None = None
    transcription_text: str | None = None
    exported: bool = False
    exported_url: str | None = None


# Fields an update may touch; provenance, id and created_at are fixed.
MUTABLE_FIELDS = frozenset(
    {
        "processed",
        "analysis_text",
        "transcription_text",
        "exported",
        "exported_url",
    }
)


@dataclass(frozen=True)
class ExportResult:
    """Outcome of a document export."""

    record: UploadRecord
    document_url: str
