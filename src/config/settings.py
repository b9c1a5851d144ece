"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ZeroTier Central
    zerotier_central_api_token: str | None = None
    zerotier_network_id: str | None = None
    zerotier_api_url: str = "https://my.zerotier.com/api"
    zerotier_cleanup_mode: Literal["deauthorize", "delete"] = "deauthorize"

    # Postmark
    postmark_server_token: str | None = None
    postmark_api_url: str = "https://api.postmarkapp.com"
    postmark_sender: str = "Holo <no-reply@holo.host>"
    postmark_template_alias: str = "failed-registration"
    internal_email_domain: str = "holo.host"  # Recipients here are tagged Internal

    # Outbound HTTP
    http_timeout_seconds: float = 10.0

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
