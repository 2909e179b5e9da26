"""Analytics engine that writes events to a log stream.

Meant for local development and staging, where events should be visible
without reaching a real analytics backend.
"""

import logging
from typing import Mapping, Optional, Union

_default_logger = logging.getLogger("beacon.analytics.events")


class LoggingAnalyticsEngine:
    """Emit one log record per analytics event.

    The name and metadata are also attached via ``extra`` as
    ``event_name`` and ``event_metadata`` for structured handlers.
    """

    def __init__(
        self,
        logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None,
        level: int = logging.INFO,
    ) -> None:
        """Write to ``logger`` (default ``beacon.analytics.events``) at ``level``."""
        self._logger = logger if logger is not None else _default_logger
        self._level = level

    def send(self, name: str, metadata: Mapping[str, str]) -> None:
        """Log the event."""
        fields = dict(metadata)
        self._logger.log(
            self._level,
            "analytics event '%s' %s",
            name,
            fields,
            extra={"event_name": name, "event_metadata": fields},
        )
