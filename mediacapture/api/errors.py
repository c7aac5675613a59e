from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mediacapture.ai.exceptions import ExternalServiceError
from mediacapture.logging.logger import Log
from mediacapture.storage.exceptions import StorageError, StorageWriteError
from mediacapture.uploads.exceptions import (
    InvalidInputError,
    PreconditionFailedError,
    UploadError,
    UploadNotFoundError,
)

_UPLOAD_ERROR_STATUS: dict[type[UploadError], int] = {
    InvalidInputError: 400,
    UploadNotFoundError: 404,
    PreconditionFailedError: 400,
}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _upload_error_handler(request: Request, exc: Exception) -> JSONResponse:
    status_code = _UPLOAD_ERROR_STATUS.get(type(exc), 400)
    return _error(status_code, str(exc))


async def _storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Log.error(f"{request.method} {request.url.path} storage failure: {exc}")
    if isinstance(exc, StorageWriteError):
        return _error(500, "Failed to store file")
    return _error(500, "Failed to read stored file")


async def _external_service_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Log.error(f"{request.method} {request.url.path} external service failure: {exc}")
    return _error(500, "AI service request failed")


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Log.exception(f"{request.method} {request.url.path} unhandled error: {exc}")
    return _error(500, "Internal server error")


async def _validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return _error(400, "Invalid request")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UploadError, _upload_error_handler)
    app.add_exception_handler(StorageError, _storage_error_handler)
    app.add_exception_handler(ExternalServiceError, _external_service_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
