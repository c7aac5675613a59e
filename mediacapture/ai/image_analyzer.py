"""Image analysis through a vision-capable completion model."""

import base64
from pathlib import Path

from mediacapture.ai.client_base import BaseAIClient
from mediacapture.ai.prompt_loader import load_image_analysis_prompt
from mediacapture.logging.logger import Log


def image_data_url(image_bytes: bytes, mime_type: str) -> str:
    """Encode image bytes as an inline data URL."""
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


class ImageAnalyzer:
    """Turns raw image bytes into a documentation-oriented text analysis."""

    def __init__(
        self,
        *,
        client: BaseAIClient,
        model: str,
        max_tokens: int = 1000,
        prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._max_tokens = max_tokens
        self._prompt = load_image_analysis_prompt(prompt_path)

    def analyze(self, image_bytes: bytes, mime_type: str) -> str:
        Log.debug(f"Analyzing {len(image_bytes)} bytes of {mime_type} with {self._model}")
        analysis = self._client.create_image_completion(
            model=self._model,
            prompt=self._prompt,
            image_url=image_data_url(image_bytes, mime_type),
            max_tokens=self._max_tokens,
        )
        Log.info(f"Image analysis complete: {len(analysis)} chars")
        return analysis
