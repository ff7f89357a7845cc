"""
Configuration for fetch_adapter using Pydantic Settings.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Adapter settings loaded from FETCH_ADAPTER_* environment variables."""

    # Transport
    DEFAULT_TIMEOUT_SECONDS: float = 10.0

    # Retry
    RETRY_MAX_ATTEMPTS: int = 3
    RETRY_BASE_DELAY_MS: float = 100.0
    RETRY_JITTER_MS: float = 50.0

    # Logging
    LOG_MASK_VISIBLE_CHARS: int = 10

    class Config:
        case_sensitive = True
        env_prefix = "FETCH_ADAPTER_"
        env_file = None  # Use system env only


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
