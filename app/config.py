"""
Configuration management for the Branch Content Engine API.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),  # .env.local takes precedence
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Google AI Configuration
    GOOGLE_AI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-pro"
    GEMINI_TEMPERATURE: float = 0.7
    GEMINI_MAX_OUTPUT_TOKENS: int = 8192

    # Redis Configuration
    REDIS_URL: str = "redis://localhost:6379"
    LATEST_CONTENT_KEY: str = "latest_content_id"
    JOBS_INDEX_KEY: str = "jobs_by_date"

    # API Configuration
    API_PORT: int = 8000
    API_HOST: str = "0.0.0.0"
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    FRONTEND_URL: str = ""
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Base URL the admin page uses for API calls (empty means same origin)
    API_BASE_URL: str = ""

    @property
    def allowed_origins(self) -> List[str]:
        """CORS origins including the configured frontend URL."""
        origins = list(self.CORS_ORIGINS)
        if self.FRONTEND_URL and self.FRONTEND_URL not in origins:
            origins.append(self.FRONTEND_URL)
        return origins


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
