from pathlib import Path

import pytest

from mediacapture.ai.audio_transcriber import AudioTranscriber
from mediacapture.ai.example_client_adapter import ExampleClientAdapter
from mediacapture.ai.image_analyzer import ImageAnalyzer
from mediacapture.database.repositories.memory_upload_repository import (
    InMemoryUploadRepository,
)
from mediacapture.processor.processor import Processor
from mediacapture.storage.file_storage import FileStorage

# PNG signature followed by filler; AI clients are faked so no decoding happens.
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"fake-png-payload"


@pytest.fixture()
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture()
def audio_bytes() -> bytes:
    """A few bytes standing in for an mp3 file; AI clients are faked."""
    return b"ID3\x03\x00\x00\x00\x00\x00\x00fake-mp3-frames"


@pytest.fixture()
def repo() -> InMemoryUploadRepository:
    return InMemoryUploadRepository()


@pytest.fixture()
def storage(tmp_path: Path) -> FileStorage:
    return FileStorage(tmp_path / "uploads")


@pytest.fixture()
def example_processor(repo: InMemoryUploadRepository, storage: FileStorage) -> Processor:
    """Processor wired to the offline example AI client."""
    client = ExampleClientAdapter()
    return Processor(
        repo=repo,
        storage=storage,
        image_analyzer=ImageAnalyzer(client=client, model="example"),
        audio_transcriber=AudioTranscriber(client=client, model="example"),
    )
