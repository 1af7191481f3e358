"""
Application settings and configuration management.

Uses pydantic-settings for environment variable loading.
"""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Interview Coach"
    app_version: str = "0.1.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # Dialogue settings
    reply_delay_seconds: float = Field(default=1.0, ge=0)  # Coach "thinking" time
    dialogue_mode: str = "evaluated"  # Options: evaluated, unconditional
    script_kind: str = "resume"  # Options: resume, fundamentals
    retry_prompt: str = "Give it another try when you're ready."

    # TTS configuration
    speech_enabled: bool = True
    tts_model: str = "edge-tts"  # Options: piper, edge-tts (anything else uses edge-tts)
    tts_voice: str = "professional"
    tts_rate: int = 16000

    # Resume upload
    max_resume_bytes: int = 5 * 1024 * 1024
    resume_extensions_str: str = Field(
        default="pdf,docx,txt",
        validation_alias="resume_extensions"
    )

    # CORS - stored as comma-separated string in env
    # Uses validation_alias to read from CORS_ORIGINS env var
    cors_origins_str: str = Field(
        default="http://localhost:3000,http://localhost:8000",
        validation_alias="cors_origins"
    )

    @computed_field
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]

    @computed_field
    @property
    def resume_extensions(self) -> list[str]:
        """Parse accepted resume extensions from comma-separated string."""
        return [
            ext.strip().lower().lstrip(".")
            for ext in self.resume_extensions_str.split(",")
            if ext.strip()
        ]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
