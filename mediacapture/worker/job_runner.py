from mediacapture.logging.logger import Log
from mediacapture.processor.processor import Processor


class JobRunner:
    """Run one processing attempt and swallow its failure.

    Single attempt: a failed upload stays unprocessed and nothing is recorded
    on it. The log line is the only trace.
    """

    def __init__(self, processor: Processor) -> None:
        self._processor = processor

    def run(self, upload_id: int) -> None:
        """Execute a single processing attempt with error handling."""
        Log.info(f"Processing upload {upload_id}")
        try:
            record = self._processor.process(upload_id)
        except Exception as exc:  # noqa: BLE001
            Log.error(f"Processing upload {upload_id} failed: {exc}")
            return
        if record is not None and record.processed:
            Log.info(f"Upload {upload_id} processed successfully")
