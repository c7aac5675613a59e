from typing import BinaryIO

from mediacapture.ai.client_base import BaseAIClient
from mediacapture.logging.logger import Log


class AudioTranscriber:
    """Speech-to-text over an open audio stream."""

    def __init__(self, *, client: BaseAIClient, model: str) -> None:
        self._client = client
        self._model = model

    def transcribe(self, audio_file: BinaryIO) -> str:
        text = self._client.create_transcription(model=self._model, audio_file=audio_file)
        Log.info(f"Transcription complete: {len(text)} chars")
        return text
