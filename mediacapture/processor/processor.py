from mediacapture.ai.audio_transcriber import AudioTranscriber
from mediacapture.ai.factory import AIClientFactory
from mediacapture.ai.image_analyzer import ImageAnalyzer
from mediacapture.config.settings import Settings
from mediacapture.database.repositories.base import BaseUploadRepository
from mediacapture.logging.logger import Log
from mediacapture.storage.file_storage import FileStorage
from mediacapture.uploads.exceptions import InvalidInputError, UploadNotFoundError
from mediacapture.uploads.models import KIND_AUDIO, KIND_IMAGE, UploadRecord


class Processor:
    """Runs the AI step for one upload and writes the result back.

    Images are analyzed, audio is transcribed. Document uploads have no
    processing branch and stay unprocessed.
    """

    def __init__(
        self,
        repo: BaseUploadRepository,
        storage: FileStorage,
        image_analyzer: ImageAnalyzer,
        audio_transcriber: AudioTranscriber,
    ) -> None:
        self._repo = repo
        self._storage = storage
        self._image_analyzer = image_analyzer
        self._audio_transcriber = audio_transcriber

    def process(self, upload_id: int) -> UploadRecord | None:
        """Dispatch the record to the branch matching its kind.

        Returns the updated record, the unchanged record for kinds without a
        branch, or None if the record no longer exists.
        """
        record = self._repo.get(upload_id)
        if record is None:
            Log.warning(f"Upload {upload_id} not found, skipping processing")
            return None

        if record.kind == KIND_IMAGE:
            return self._analyze(record)
        if record.kind == KIND_AUDIO:
            return self._transcribe(record)

        Log.debug(f"No processing branch for {record.kind} upload {upload_id}")
        return record

    def analyze(self, upload_id: int) -> UploadRecord:
        """Run image analysis on demand.

        Raises:
            UploadNotFoundError: if the record does not exist.
            InvalidInputError: if the record is not an image.
        """
        record = self._require(upload_id)
        if record.kind != KIND_IMAGE:
            raise InvalidInputError("Only images can be analyzed")
        return self._analyze(record)

    def transcribe(self, upload_id: int) -> UploadRecord:
        """Run audio transcription on demand.

        Raises:
            UploadNotFoundError: if the record does not exist.
            InvalidInputError: if the record is not audio.
        """
        record = self._require(upload_id)
        if record.kind != KIND_AUDIO:
            raise InvalidInputError("Only audio files can be transcribed")
        return self._transcribe(record)

    def _require(self, upload_id: int) -> UploadRecord:
        record = self._repo.get(upload_id)
        if record is None:
            raise UploadNotFoundError("Upload not found")
        return record

    def _analyze(self, record: UploadRecord) -> UploadRecord:
        image_bytes = self._storage.read_bytes(record.storage_path)
        Log.info(f"Loaded {len(image_bytes)} bytes for image upload {record.id}")
        analysis = self._image_analyzer.analyze(image_bytes, record.mime_type)
        return self._write_back(record.id, analysis_text=analysis, processed=True)

    def _transcribe(self, record: UploadRecord) -> UploadRecord:
        with self._storage.open(record.storage_path) as audio_file:
            transcription = self._audio_transcriber.transcribe(audio_file)
        return self._write_back(record.id, transcription_text=transcription, processed=True)

    def _write_back(self, upload_id: int, **fields: object) -> UploadRecord:
        updated = self._repo.update(upload_id, **fields)
        if updated is None:
            Log.warning(f"Upload {upload_id} was removed during processing")
            raise UploadNotFoundError("Upload not found")
        Log.info(f"Upload {upload_id} marked as processed")
        return updated


def build_processor(
    settings: Settings,
    repo: BaseUploadRepository,
    storage: FileStorage,
) -> Processor:
    """Build a Processor with the configured AI adapters."""
    client = AIClientFactory.create(settings)
    image_analyzer = ImageAnalyzer(
        client=client,
        model=settings.vision_model_name,
        max_tokens=settings.image_analysis_max_tokens,
    )
    audio_transcriber = AudioTranscriber(
        client=client,
        model=settings.transcription_model_name,
    )
    return Processor(
        repo=repo,
        storage=storage,
        image_analyzer=image_analyzer,
        audio_transcriber=audio_transcriber,
    )
