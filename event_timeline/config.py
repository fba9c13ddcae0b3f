"""
Application configuration using Pydantic Settings.

Centralizes environment variables and the timeline layout defaults.
Using Pydantic BaseSettings gives us validation and type safety for config.
"""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    All sensitive/configurable values should live here.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars not defined here
    )

    # Application
    app_name: str = "Event Timeline API"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    # Supabase JWT validation - must match Dashboard → Project Settings → API → JWT Secret
    supabase_url: str = "https://your-project.supabase.co"
    supabase_jwt_secret: Optional[str] = None

    @field_validator("supabase_jwt_secret", mode="before")
    @classmethod
    def strip_jwt_secret(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not isinstance(v, str):
            return v
        return v.strip() or None

    # Document import
    max_upload_size_mb: int = 10
    import_default_duration_minutes: int = 30  # End time for imported lines without one

    # Timeline layout
    default_pixels_per_hour: float = 200.0
    layout_pad_minutes: int = 1  # Hairline gap between back-to-back blocks
    layout_min_height_px: float = 40.0
    default_duration_minutes: int = 60  # Applied when an entry has no end time


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings instance.
    Using lru_cache avoids re-reading .env on every request.
    """
    return Settings()
