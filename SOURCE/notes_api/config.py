"""
Configuration module for the development notes API.

The application reads its configuration primarily from environment
variables, with sensible defaults to make local development simple.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path


class Settings:
    """Defines runtime configuration for the notes API."""

    # Flask / server
    debug: bool = False
    secret_key: str = "change-me-in-production"
    port: int = 5000

    # Database
    database_url: str = (
        f"sqlite:///{Path(__file__).resolve().parent / 'notes.db'}"
    )

    # Logging
    log_level: str = "INFO"

    def update_from_env(self) -> None:
        """Override defaults with values from the environment."""
        import os

        self.debug = os.getenv("FLASK_DEBUG", str(self.debug)).lower() in {
            "1",
            "true",
            "yes",
        }
        self.secret_key = os.getenv("FLASK_SECRET_KEY", self.secret_key)
        self.port = int(os.getenv("NOTES_API_PORT", str(self.port)))

        self.database_url = os.getenv("DATABASE_URL", self.database_url)

        self.log_level = os.getenv("NOTES_LOG_LEVEL", self.log_level).upper()


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of Settings populated from environment."""
    settings = Settings()
    settings.update_from_env()
    return settings


__all__ = ["Settings", "get_settings"]
