"""Container Factory.

All construction logic lives here. The factory reads settings and builds
the container with environment-appropriate implementations.

Design principles:
- Single place for all wiring decisions
- Fail fast: missing settings crash at startup, not on the first event
- Testable: can unit test factory logic with explicit settings
"""

from typing import Optional

from beacon.adapters.analytics import (
    HttpRecordAnalyticsEngine,
    LoggingAnalyticsEngine,
    NullAnalyticsEngine,
    PostHogAnalyticsEngine,
)
from beacon.core.analytics_manager import AnalyticsManager
from beacon.core.config import AnalyticsBackend, Settings
from beacon.core.config import settings as default_settings
from beacon.core.container.container import Container
from beacon.core.exceptions import AnalyticsConfigError
from beacon.core.logging import LoggerConfigurator, logger
from beacon.core.protocols import AnalyticsEngine


def create_container(settings: Settings) -> Container:
    """Build container with environment-appropriate implementations.

    Args:
        settings: Application settings (from core/config)

    Returns:
        Fully constructed Container ready for use

    Example:
        from beacon.core.config import settings
        from beacon.core.container import create_container

        container = create_container(settings)
        container.analytics.log(LoginScreenViewed())
    """
    engine = create_analytics_engine(settings)
    logger.info(
        "Analytics wired to %s (backend=%s)",
        type(engine).__name__,
        settings.ANALYTICS_BACKEND.value,
    )
    return Container.for_engine(engine)


def create_analytics_manager(settings: Optional[Settings] = None) -> AnalyticsManager:
    """Build a manager bound to the engine selected by ``settings``."""
    return AnalyticsManager(create_analytics_engine(settings or default_settings))


def create_analytics_engine(settings: Settings) -> AnalyticsEngine:
    """Select and construct the analytics engine.

    Raises:
        AnalyticsConfigError: If the selected backend is missing required settings.
    """
    if not settings.ANALYTICS_ENABLED:
        return NullAnalyticsEngine()

    backend = settings.ANALYTICS_BACKEND

    if backend == AnalyticsBackend.NULL:
        return NullAnalyticsEngine()

    if backend == AnalyticsBackend.LOGGING:
        return LoggingAnalyticsEngine(
            LoggerConfigurator.configure_logger(
                "beacon.analytics.events",
                dimensions={"environment": settings.ENVIRONMENT.value},
            )
        )

    if backend == AnalyticsBackend.POSTHOG:
        if not settings.POSTHOG_API_KEY:
            raise AnalyticsConfigError("ANALYTICS_BACKEND=posthog requires POSTHOG_API_KEY")
        return PostHogAnalyticsEngine(settings)

    if backend == AnalyticsBackend.HTTP:
        if not settings.ANALYTICS_HTTP_BASE_URL:
            raise AnalyticsConfigError("ANALYTICS_BACKEND=http requires ANALYTICS_HTTP_BASE_URL")
        return HttpRecordAnalyticsEngine(
            base_url=settings.ANALYTICS_HTTP_BASE_URL,
            api_key=settings.ANALYTICS_HTTP_API_KEY,
            timeout=settings.ANALYTICS_HTTP_TIMEOUT,
            max_workers=settings.ANALYTICS_HTTP_MAX_WORKERS,
            max_pending=settings.ANALYTICS_HTTP_MAX_PENDING,
        )

    raise AnalyticsConfigError(f"Unknown analytics backend: {backend}")
