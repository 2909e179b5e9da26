"""PostHog analytics engine adapter."""

import logging
from typing import Any, Dict, Mapping, Optional

from posthog import Posthog

from beacon.core.config import Environment, Settings

logger = logging.getLogger(__name__)


class PostHogAnalyticsEngine:
    """Wraps the PostHog SDK behind the AnalyticsEngine protocol.

    The SDK client queues each capture and uploads it from its own
    background thread, so ``send`` returns as soon as the event is queued.
    Every event is enriched with the deployment environment so dashboards
    can tell local, dev and production traffic apart.
    """

    def __init__(self, settings: Settings, client: Optional[Posthog] = None) -> None:
        """Configure the PostHog client from application settings."""
        self._environment = settings.ENVIRONMENT
        self._distinct_id = settings.ANALYTICS_DISTINCT_ID
        self._enabled = (
            settings.ANALYTICS_ENABLED
            and settings.ENVIRONMENT != Environment.LOCAL
            and bool(settings.POSTHOG_API_KEY)
        )
        self._client: Optional[Posthog] = None

        if self._enabled:
            self._client = client or Posthog(settings.POSTHOG_API_KEY, host=settings.POSTHOG_HOST)
            logger.info(
                "PostHog analytics engine initialized (env=%s)", self._environment.value
            )
        else:
            logger.info("PostHog analytics engine disabled (env=%s)", self._environment.value)

    @property
    def enabled(self) -> bool:
        """Whether events are actually forwarded."""
        return self._enabled

    def _base_properties(self) -> Dict[str, Any]:
        return {"environment": self._environment.value}

    def send(self, name: str, metadata: Mapping[str, str]) -> None:
        """Queue the event for PostHog, enriched with deployment metadata."""
        if self._client is None:
            return

        try:
            self._client.capture(
                distinct_id=self._distinct_id,
                event=name,
                properties={**self._base_properties(), **metadata},
            )
        except Exception as e:
            logger.error("Failed to send analytics event '%s': %s", name, e)

    def close(self) -> None:
        """Flush queued events and stop the SDK's upload thread."""
        if self._client is None:
            return
        try:
            self._client.shutdown()
        except Exception as e:
            logger.error("Failed to shut down PostHog client: %s", e)
