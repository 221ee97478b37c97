"""
Symptom journal application settings.

Extends the base settings with analytics-specific configuration.
"""

import logging

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Symptom-journal-specific settings."""

    # ==========================================================================
    # Storage
    # ==========================================================================
    CHECKINS_COLLECTION: str = "checkins"

    # ==========================================================================
    # Analytics Settings
    # ==========================================================================
    # Largest window (in days) accepted by windowed reports
    MAX_WINDOW_DAYS: int = 365

    # Doctor summary range when the caller gives no start date
    DEFAULT_SUMMARY_DAYS: int = 30

    # Longest doctor summary range (in days) a caller may request
    MAX_SUMMARY_DAYS: int = 365


def configure_logging(level: str = "INFO") -> None:
    """Apply the standard log format to the root logger."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


# Global settings instance
settings = Settings()
