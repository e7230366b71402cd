"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_MODEL_LADDER = [
    "v1beta/gemini-2.5-flash",
    "v1beta/gemini-2.0-flash",
    "v1/gemini-2.5-flash",
    "v1/gemini-2.0-flash",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    gemini_api_key: str | None = None
    gemini_base_url: str = "https://generativelanguage.googleapis.com"
    gemini_model_ladder: list[str] = DEFAULT_MODEL_LADDER
    gemini_discovery_version: str = "v1beta"
    gemini_family_marker: str = "gemini"
    gemini_temperature: float = 0.1
    gemini_max_output_tokens: int = 2048
    gemini_timeout_seconds: float = 30
    storage_backend: str = "file"
    storage_path: str = "fittrack_data.json"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def generation_config(self) -> dict[str, object]:
        """Return the generationConfig used for nutrition estimates."""
        return {
            "temperature": self.gemini_temperature,
            "maxOutputTokens": self.gemini_max_output_tokens,
            "responseMimeType": "application/json",
        }
