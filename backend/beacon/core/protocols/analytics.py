"""Protocol for analytics transport engines."""

from typing import Mapping, Protocol, runtime_checkable


@runtime_checkable
class AnalyticsEngine(Protocol):
    """Fire-and-forget delivery of one encoded analytics event.

    Adapter boundary between the analytics manager and whatever backend
    stores the events (PostHog, an HTTP record store, a log stream, or an
    in-memory fake in tests).
    """

    def send(self, name: str, metadata: Mapping[str, str]) -> None:
        """Send a single named event with string metadata.

        Implementations must be safe to call in fire-and-forget style:
        transport errors are logged, never raised. Network-backed
        implementations hand the write off and return without waiting
        for acknowledgement.
        """
        ...
