from dataclasses import dataclass

from fastapi import Request

from mediacapture.config.settings import Settings
from mediacapture.database.repositories.base import BaseUploadRepository
from mediacapture.processor.processor import Processor
from mediacapture.uploads.deletion import UploadDeleter
from mediacapture.uploads.export import ExportService
from mediacapture.uploads.ingest import UploadIngest
from mediacapture.worker.worker import BaseWorker


@dataclass
class Services:
    """Everything the HTTP layer needs, wired once at startup."""

    settings: Settings
    repo: BaseUploadRepository
    ingest: UploadIngest
    processor: Processor
    exporter: ExportService
    deleter: UploadDeleter
    worker: BaseWorker


def get_services(request: Request) -> Services:
    return request.app.state.services
