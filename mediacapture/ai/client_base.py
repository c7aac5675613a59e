from abc import ABC, abstractmethod
from typing import BinaryIO


class BaseAIClient(ABC):
    """Contract for provider-specific vision and speech-to-text clients."""

    @abstractmethod
    def create_image_completion(
        self,
        *,
        model: str,
        prompt: str,
        image_url: str,
        max_tokens: int,
    ) -> str:
        """Describe an image given as a URL (usually an inline data URL).

        Raises:
            AIServiceError: on any provider failure or empty response.
        """

    @abstractmethod
    def create_transcription(self, *, model: str, audio_file: BinaryIO) -> str:
        """Transcribe an open audio stream to text.

        Raises:
            AIServiceError: on any provider failure.
        """
