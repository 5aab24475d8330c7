"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from skillpath.shared.constants import DEFAULT_TIME_AVAILABLE


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # Anthropic (optional: without a key recommendations use the fallback provider)
    anthropic_api_key: str | None = None

    # LLM Settings
    default_model: str = "claude-sonnet-4-20250514"
    max_tokens: int = 1024
    temperature: float = 0.7

    # Recommendation provider selection
    # "auto" uses the live provider only when a credential is configured
    recommendation_provider: Literal["auto", "live", "fallback"] = "auto"
    recommendation_time_available: str = DEFAULT_TIME_AVAILABLE

    # Client-side settings for the recommendation requester
    api_base_url: str = "http://127.0.0.1:8000"
    api_timeout_seconds: float = 30.0

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # CORS Settings
    # In production, set CORS_ORIGINS to a comma-separated list of allowed origins
    cors_origins: str = ""

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def has_ai_credential(self) -> bool:
        return bool(self.anthropic_api_key and self.anthropic_api_key.strip())

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list.

        Returns:
            List of allowed origins. In development, includes localhost.
            In production, only returns explicitly configured origins.
        """
        if self.cors_origins:
            return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
        if self.is_development:
            return [
                "http://localhost:3000",
                "http://localhost:5173",
                "http://127.0.0.1:3000",
                "http://127.0.0.1:5173",
            ]
        return []


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
