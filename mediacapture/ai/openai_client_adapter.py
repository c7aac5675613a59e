from typing import BinaryIO

import httpx
import openai

from mediacapture.ai.client_base import BaseAIClient
from mediacapture.ai.exceptions import AIServiceError, AIServiceNetworkError


class OpenAIClientAdapter(BaseAIClient):
    """AI client adapter built on the OpenAI-compatible chat and audio APIs."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_image_completion(
        self,
        *,
        model: str,
        prompt: str,
        image_url: str,
        max_tokens: int,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                max_tokens=max_tokens,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": prompt},
                            {"type": "image_url", "image_url": {"url": image_url}},
                        ],
                    },
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AIServiceNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AIServiceNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AIServiceError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AIServiceError("AI returned empty response")
        return content

    def create_transcription(self, *, model: str, audio_file: BinaryIO) -> str:
        try:
            transcription = self._client.audio.transcriptions.create(
                model=model,
                file=audio_file,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AIServiceNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AIServiceNetworkError(f"AI provider API error: {exc}") from exc

        if transcription.text is None:
            raise AIServiceError("AI returned empty transcription")
        return transcription.text
