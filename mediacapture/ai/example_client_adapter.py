"""Example AI client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseAIClient and register the provider in AIClientFactory.
"""

from typing import BinaryIO, ClassVar

from mediacapture.ai.client_base import BaseAIClient


class ExampleClientAdapter(BaseAIClient):
    """Example adapter that returns fixed analysis and transcription text.

    No network calls. Useful for local development, tests, and as a template
    for building real provider adapters.
    """

    IMAGE_ANALYSIS: ClassVar[str] = (
        "Example analysis: a photographed page with a heading, two paragraphs "
        "of text and a bar chart."
    )
    TRANSCRIPTION: ClassVar[str] = "Example transcription of the recorded audio."

    def create_image_completion(
        self,
        *,
        model: str,
        prompt: str,
        image_url: str,
        max_tokens: int,
    ) -> str:
        _ = model, prompt, image_url, max_tokens
        return self.IMAGE_ANALYSIS

    def create_transcription(self, *, model: str, audio_file: BinaryIO) -> str:
        _ = model, audio_file
        return self.TRANSCRIPTION
