from abc import ABC, abstractmethod
from concurrent.futures import Future, ThreadPoolExecutor

from mediacapture.config.settings import Settings
from mediacapture.logging.logger import Log
from mediacapture.worker.job_runner import JobRunner


class BaseWorker(ABC):
    """Accepts upload ids for background processing.

    Submitters get a Future back and are not expected to wait on it.
    """

    def __init__(self, job_runner: JobRunner) -> None:
        self._job_runner = job_runner

    @abstractmethod
    def submit(self, upload_id: int) -> "Future[None]":
        """Schedule one processing attempt for the upload."""

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work. Running attempts are never cancelled."""


class BackgroundWorker(BaseWorker):
    """Runs processing attempts on a thread pool."""

    def __init__(self, job_runner: JobRunner, max_workers: int | None = None) -> None:
        super().__init__(job_runner)
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="upload-processing",
        )

    def submit(self, upload_id: int) -> "Future[None]":
        Log.debug(f"Submitting upload {upload_id} for background processing")
        return self._executor.submit(self._job_runner.run, upload_id)

    def shutdown(self, wait: bool = True) -> None:
        Log.info("Background worker shutting down")
        self._executor.shutdown(wait=wait)


class InlineWorker(BaseWorker):
    """Runs each attempt synchronously in the submitting thread."""

    def submit(self, upload_id: int) -> "Future[None]":
        future: Future[None] = Future()
        self._job_runner.run(upload_id)
        future.set_result(None)
        return future


def build_worker(settings: Settings, job_runner: JobRunner) -> BaseWorker:
    """Create the worker for the configured processing mode."""
    mode = settings.processing_mode.lower()
    if mode == "thread":
        return BackgroundWorker(job_runner, max_workers=settings.processing_max_workers)
    if mode == "inline":
        return InlineWorker(job_runner)
    raise ValueError(f"Unknown processing mode '{mode}'. Choose from: ['inline', 'thread']")
