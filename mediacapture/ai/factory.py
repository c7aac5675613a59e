from typing import ClassVar

from mediacapture.ai.client_base import BaseAIClient
from mediacapture.ai.example_client_adapter import ExampleClientAdapter
from mediacapture.ai.openai_client_adapter import OpenAIClientAdapter
from mediacapture.config.settings import Settings


class AIClientFactory:
    """Creates the configured AI client adapter."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseAIClient:
        """Create a configured AI client from application settings."""
        provider = settings.ai_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=settings.ai_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = (settings.ai_base_url or "").strip()
            if not url:
                raise ValueError(
                    "ai_base_url is required for ai_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return (settings.ai_base_url or "").strip() or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown AI provider '{provider}'. Choose from: {supported}")

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        if provider == "openai":
            return settings.openai_api_key
        return settings.ai_api_key
