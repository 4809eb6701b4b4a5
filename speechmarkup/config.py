"""Library configuration from environment variables."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Defaults used when a builder is created without explicit options."""

    # Target platform
    preset: Optional[str] = Field(
        default=None,
        description="Preset name (default, alexa, google, cortana); None uses 'default'",
    )

    # Document options
    base_url: Optional[str] = None  # Base for relative audio URLs
    language: Optional[str] = None  # e.g. "en-US"
    pretty: bool = False

    # Raise on unknown presets or malformed overrides instead of
    # falling back to the full SSML baseline
    strict: bool = False

    model_config = {
        "env_prefix": "SPEECHMARKUP_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
