"""
Foe Finder — Application Configuration

Loads all configuration from environment variables (and an optional .env file)
using Pydantic Settings.  A cached ``get_settings()`` helper is provided so that
FastAPI dependency-injection (and any other call-site) always receives the same
validated instance without re-parsing the environment on every request.

The scoring engine in ``foefinder.services`` never reads settings itself; the
API layer passes the relevant values in as explicit parameters.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for the Foe Finder scoring service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------ #
    # Runtime environment
    # ------------------------------------------------------------------ #
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    REQUEST_TIMEOUT_SECONDS: float = 30.0

    # ------------------------------------------------------------------ #
    # CORS
    # ------------------------------------------------------------------ #
    ALLOWED_ORIGINS: str = "*"

    # ------------------------------------------------------------------ #
    # Scoring parameters
    # ------------------------------------------------------------------ #
    HOT_TAKE_COUNT: int = 3
    DISAGREEMENT_THRESHOLD: float = 3.0    # |value - mean| that counts as disagreeing
    OUTLIER_MIN_RESPONSES: int = 5         # below this, percentile claims are suppressed
    HIGH_VARIANCE_STD_DEV: float = 1.8     # admin analytics "divisive question" flag
    TOP_DIFFERENCES_COUNT: int = 5

    # ------------------------------------------------------------------ #
    # Derived helpers
    # ------------------------------------------------------------------ #
    @property
    def allowed_origins_list(self) -> list[str]:
        """Return ALLOWED_ORIGINS as a list split on commas."""
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",")]

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @field_validator("HOT_TAKE_COUNT", "OUTLIER_MIN_RESPONSES", "TOP_DIFFERENCES_COUNT")
    @classmethod
    def _count_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"Count must be non-negative, got {v}")
        return v

    @field_validator("DISAGREEMENT_THRESHOLD", "HIGH_VARIANCE_STD_DEV", "REQUEST_TIMEOUT_SECONDS")
    @classmethod
    def _threshold_must_be_positive(cls, v: float) -> float:
        if v <= 0.0:
            raise ValueError(f"Threshold must be positive, got {v}")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached, validated ``Settings`` instance.

    Using ``@lru_cache`` guarantees the .env file is read and validated
    exactly once per process lifetime.  Tests that change the environment
    call ``get_settings.cache_clear()`` afterwards::

        from foefinder.config import get_settings
        settings = get_settings()
    """
    return Settings()
