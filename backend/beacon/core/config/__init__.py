"""Configuration module for Beacon.

Provides centralized configuration management with type-safe enums.

Usage:
    from beacon.core.config import settings, AnalyticsBackend

    if settings.ANALYTICS_BACKEND == AnalyticsBackend.POSTHOG:
        ...
"""

from beacon.core.config.enums import AnalyticsBackend, Environment
from beacon.core.config.settings import Settings

__all__ = [
    "AnalyticsBackend",
    "Environment",
    "Settings",
    "settings",
]

# Singleton settings instance
settings = Settings()
