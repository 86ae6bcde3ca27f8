"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    openai_temperature: float = 0.3
    openai_max_tokens: int = 500
    openai_estimate_max_tokens: int = 150
    openai_timeout_seconds: float = 15.0
    ai_parsing_enabled: bool = True
    estimate_ttl_seconds: int = 86400
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def ai_configured(self) -> bool:
        """True when AI parsing is enabled and an API key is present."""
        return self.ai_parsing_enabled and bool(
            self.openai_api_key and self.openai_api_key.strip()
        )
