from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_MB = 1024 * 1024


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    app_env: str = "dev"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 5000

    upload_dir: str = "uploads"
    max_image_size_bytes: int = 10 * _MB
    max_audio_size_bytes: int = 25 * _MB
    max_document_size_bytes: int = 25 * _MB

    record_store: str = "memory"
    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "mediacapture"
    db_username: str = "mediacapture"
    db_password: str = "secret"

    processing_mode: str = "thread"
    processing_max_workers: int = 8

    ai_provider: str = "openai"
    openai_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("openai_api_key", "openai_key"),
    )
    ai_api_key: str = ""
    ai_base_url: str | None = None
    ai_timeout_seconds: int = 60
    vision_model_name: str = "gpt-4o"
    transcription_model_name: str = "whisper-1"
    image_analysis_max_tokens: int = 1000

    export_provider: str = "mock"
    export_base_url: str = "https://docs.google.com/document/d/"

    def max_size_bytes(self) -> dict[str, int]:
        """Per-kind upload size ceilings."""
        return {
            "image": self.max_image_size_bytes,
            "audio": self.max_audio_size_bytes,
            "document": self.max_document_size_bytes,
        }
