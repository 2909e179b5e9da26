"""Top-level API for logging analytics events.

Application code receives an ``AnalyticsManager`` (injected at construction)
and calls ``log`` with a typed event. The manager encodes the event and
hands it to its engine; it never decides how or where events are stored.
"""

import logging

from beacon.core.events import codec
from beacon.core.events.catalog import AnalyticsEvent
from beacon.core.protocols.analytics import AnalyticsEngine

logger = logging.getLogger(__name__)


class AnalyticsManager:
    """Encodes events and forwards them to a single engine.

    The engine is bound for the manager's lifetime. To send somewhere
    else, build another manager.

    ``log`` is safe to call unconditionally: it returns ``None`` and never
    raises, whatever the engine does. Failures are only visible in the
    log. Do not reuse this pattern for writes the application depends on.
    """

    def __init__(self, engine: AnalyticsEngine) -> None:
        """Bind the manager to ``engine``."""
        self._engine = engine

    @property
    def engine(self) -> AnalyticsEngine:
        """The engine events are sent to."""
        return self._engine

    def log(self, event: AnalyticsEvent) -> None:
        """Encode ``event`` and send it without waiting for delivery."""
        try:
            encoded = codec.encode(event)
        except Exception as e:
            logger.error("Failed to encode analytics event %r: %s", event, e)
            return

        try:
            self._engine.send(encoded.name, encoded.metadata)
        except Exception as e:
            logger.error(
                "Analytics engine %s failed for '%s': %s",
                type(self._engine).__name__,
                encoded.name,
                e,
            )
