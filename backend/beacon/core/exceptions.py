"""Shared exceptions module."""

from typing import Optional


class BeaconException(Exception):
    """Base exception for Beacon."""

    pass


class EventCatalogError(BeaconException):
    """Raised when the event catalog and the codec disagree.

    The codec checks the catalog while it is imported, so this surfaces
    when a variant is added without an encoder (or vice versa), before any
    event is logged.
    """

    def __init__(self, message: Optional[str] = "Event catalog is inconsistent"):
        """Create a new EventCatalogError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class UnknownEventError(BeaconException, TypeError):
    """Raised when a value outside the event catalog is passed to the codec."""

    def __init__(self, value: object):
        """Create a new UnknownEventError instance.

        Args:
        ----
            value (object): The offending value.

        """
        self.value = value
        self.message = f"Not an analytics event: {type(value).__name__}"
        super().__init__(self.message)


class AnalyticsConfigError(BeaconException):
    """Raised when settings cannot produce a working analytics engine."""

    def __init__(self, message: Optional[str] = "Invalid analytics configuration"):
        """Create a new AnalyticsConfigError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)
