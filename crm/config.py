"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_GENERATOR_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_GENERATOR_MODEL = "llama-3.1-8b-instant"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./crm.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to localize naive datetimes (IANA name or UTC+hh:mm)",
    )
    openai_api_key: str | None = Field(
        default=None,
        description="API key for the OpenAI-compatible endpoint that generates audience rules",
    )
    openai_base_url: str | None = Field(
        default=DEFAULT_GENERATOR_BASE_URL,
        description="Base URL of the OpenAI-compatible chat completions API",
    )
    openai_model: str = Field(
        default=DEFAULT_GENERATOR_MODEL,
        description="Model used to translate audience descriptions into rules",
        min_length=1,
    )
    openai_temperature: float = Field(
        default=0.7,
        description="Sampling temperature for generation requests",
        ge=0,
        le=2,
    )
    openai_timeout_seconds: float = Field(
        default=30.0,
        description="Transport timeout applied to every generation request",
        gt=0,
    )
    openai_json_mode: bool = Field(
        default=True,
        description="Request a JSON object response format from the generation API",
    )

    @model_validator(mode="after")
    def _strip_generator_values(self) -> "Settings":
        if self.openai_api_key is not None:
            self.openai_api_key = self.openai_api_key.strip() or None
        if self.openai_base_url is not None:
            self.openai_base_url = self.openai_base_url.strip() or None
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
