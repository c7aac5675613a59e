"""Upload API router."""

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from mediacapture.api.dependencies import Services, get_services
from mediacapture.api.schemas import (
    DeleteResponse,
    ErrorResponse,
    ExportResponse,
    UploadResponse,
)
from mediacapture.uploads.exceptions import InvalidInputError, UploadNotFoundError

router = APIRouter()

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("", response_model=list[UploadResponse])
def list_uploads(services: Services = Depends(get_services)):
    """List all uploads, newest first."""
    return [UploadResponse.from_record(r) for r in services.repo.list()]


@router.get("/{upload_id}", response_model=UploadResponse, responses=_ERRORS)
def get_upload(upload_id: int, services: Services = Depends(get_services)):
    record = services.repo.get(upload_id)
    if record is None:
        raise UploadNotFoundError("Upload not found")
    return UploadResponse.from_record(record)


@router.post("", response_model=UploadResponse, responses=_ERRORS)
def create_upload(
    file: UploadFile | None = File(default=None),
    kind: str | None = Form(default=None, alias="type"),
    services: Services = Depends(get_services),
):
    """Store an upload and start its processing in the background.

    The returned record is always unprocessed; poll GET /api/uploads/{id}
    to see the analysis or transcription arrive.
    """
    if file is None:
        raise InvalidInputError("No file uploaded")

    # Read one byte past the largest ceiling so oversize files are detectable.
    read_limit = max(services.settings.max_size_bytes().values()) + 1
    data = file.file.read(read_limit)
    record = services.ingest.ingest(
        data,
        kind=kind,
        filename=file.filename or "upload",
        content_type=file.content_type or "application/octet-stream",
    )
    return UploadResponse.from_record(record)


@router.post("/{upload_id}/analyze", response_model=UploadResponse, responses=_ERRORS)
def analyze_upload(upload_id: int, services: Services = Depends(get_services)):
    """Run image analysis now and return the updated record."""
    return UploadResponse.from_record(services.processor.analyze(upload_id))


@router.post("/{upload_id}/transcribe", response_model=UploadResponse, responses=_ERRORS)
def transcribe_upload(upload_id: int, services: Services = Depends(get_services)):
    """Run audio transcription now and return the updated record."""
    return UploadResponse.from_record(services.processor.transcribe(upload_id))


@router.post("/{upload_id}/upload-to-docs", response_model=ExportResponse, responses=_ERRORS)
def export_upload(upload_id: int, services: Services = Depends(get_services)):
    return ExportResponse.from_result(services.exporter.export(upload_id))


@router.delete("/{upload_id}", response_model=DeleteResponse, responses=_ERRORS)
def delete_upload(upload_id: int, services: Services = Depends(get_services)):
    if not services.deleter.delete(upload_id):
        return JSONResponse(status_code=500, content={"error": "Failed to delete upload"})
    return DeleteResponse()
