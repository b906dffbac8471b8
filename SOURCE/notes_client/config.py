"""
Configuration for the notes client.

Values come from environment variables, with defaults that point at the
local development API.
"""

from __future__ import annotations

from functools import lru_cache


class Settings:
    """Defines runtime configuration for the notes client."""

    # Notes API
    api_url: str = "http://localhost:5000"
    request_timeout_seconds: int = 30

    # Logging
    log_level: str = "INFO"

    def update_from_env(self) -> None:
        """Override defaults with values from the environment."""
        import os

        self.api_url = os.getenv("NOTES_API_URL", self.api_url)
        self.request_timeout_seconds = int(
            os.getenv(
                "NOTES_API_TIMEOUT_SECONDS",
                str(self.request_timeout_seconds),
            )
        )
        self.log_level = os.getenv("NOTES_LOG_LEVEL", self.log_level).upper()


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of Settings populated from environment."""
    settings = Settings()
    settings.update_from_env()
    return settings


__all__ = ["Settings", "get_settings"]
