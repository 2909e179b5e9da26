"""Analytics engine that drops every event."""

from typing import Mapping


class NullAnalyticsEngine:
    """Used when analytics is switched off."""

    def send(self, name: str, metadata: Mapping[str, str]) -> None:
        """Discard the event."""
        return None
