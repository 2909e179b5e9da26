"""Application settings loaded from the environment."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from beacon.core.config.enums import AnalyticsBackend, Environment


class Settings(BaseSettings):
    """Beacon settings.

    Values come from environment variables (or a local ``.env`` file).
    Variable names match the attribute names, e.g. ``ANALYTICS_BACKEND=posthog``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    ENVIRONMENT: Environment = Environment.LOCAL
    LOG_LEVEL: str = "INFO"

    ANALYTICS_ENABLED: bool = True
    ANALYTICS_BACKEND: AnalyticsBackend = AnalyticsBackend.LOGGING
    ANALYTICS_DISTINCT_ID: str = Field(
        "anonymous", description="Identity attached to events by engines that need one"
    )

    POSTHOG_API_KEY: Optional[str] = None
    POSTHOG_HOST: str = "https://app.posthog.com"

    ANALYTICS_HTTP_BASE_URL: Optional[str] = Field(
        None, description="Base URL of the record store receiving analytics records"
    )
    ANALYTICS_HTTP_API_KEY: Optional[str] = None
    ANALYTICS_HTTP_TIMEOUT: float = Field(5.0, gt=0)
    ANALYTICS_HTTP_MAX_WORKERS: int = Field(2, ge=1)
    ANALYTICS_HTTP_MAX_PENDING: int = Field(
        1000, ge=1, description="Saves allowed in flight before new events are dropped"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return level
