"""
Yacht Dice - Application Settings

Loads configuration from environment variables using Pydantic Settings.
Variables are prefixed with ``YACHT_`` (for example ``YACHT_LOG_LEVEL``).
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "WARNING"

    # Dice
    seed: int | None = None

    # Presentation
    show_potential_scores: bool = True

    model_config = {
        "env_prefix": "YACHT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
