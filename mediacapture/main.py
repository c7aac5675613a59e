import uvicorn

from mediacapture.api.app import create_app
from mediacapture.api.dependencies import Services
from mediacapture.config.settings import Settings
from mediacapture.database.repositories.factory import UploadRepositoryFactory
from mediacapture.export.factory import DocumentExporterFactory
from mediacapture.logging.logger import Log
from mediacapture.processor.processor import build_processor
from mediacapture.storage.file_storage import FileStorage
from mediacapture.uploads.deletion import UploadDeleter
from mediacapture.uploads.export import ExportService
from mediacapture.uploads.ingest import UploadIngest
from mediacapture.worker.job_runner import JobRunner
from mediacapture.worker.worker import build_worker


def build_services(settings: Settings) -> Services:
    """Build store -> storage -> processor -> worker -> upload services."""
    repo = UploadRepositoryFactory.create(settings)
    storage = FileStorage(settings.upload_dir)
    processor = build_processor(settings, repo, storage)
    worker = build_worker(settings, JobRunner(processor))
    return Services(
        settings=settings,
        repo=repo,
        ingest=UploadIngest(repo, storage, worker, settings.max_size_bytes()),
        processor=processor,
        exporter=ExportService(repo, DocumentExporterFactory.create(settings)),
        deleter=UploadDeleter(repo, storage),
        worker=worker,
    )


def main() -> None:
    """Entry point: configure logging -> build services -> serve HTTP."""
    settings = Settings()
    Log.configure(settings.log_level)
    app = create_app(build_services(settings))
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
