"""Fake analytics engine for testing."""

import threading
from dataclasses import dataclass, field
from typing import Dict, Mapping


@dataclass
class SentEvent:
    """Single recorded send call."""

    name: str
    metadata: Dict[str, str] = field(default_factory=dict)


class FakeAnalyticsEngine:
    """In-memory test double for AnalyticsEngine.

    Records all sent events for assertions. Appends are locked so
    concurrent senders never lose an event; order across threads is
    arrival order.

    Usage:
        engine = FakeAnalyticsEngine()
        manager = AnalyticsManager(engine)
        manager.log(MessageSelected(index=2))
        assert engine.get("messageSelected").metadata == {"index": "2"}
    """

    def __init__(self) -> None:
        """Initialize with empty event list."""
        self.events: list[SentEvent] = []
        self._lock = threading.Lock()

    def send(self, name: str, metadata: Mapping[str, str]) -> None:
        """Record the event for later assertions."""
        sent = SentEvent(name=name, metadata=dict(metadata))
        with self._lock:
            self.events.append(sent)

    def names(self) -> list[str]:
        """Return recorded event names in arrival order."""
        with self._lock:
            return [e.name for e in self.events]

    def has(self, name: str) -> bool:
        """Return True if an event with the given name was sent."""
        return name in self.names()

    def get(self, name: str) -> SentEvent:
        """Return the first sent event matching name, or raise AssertionError."""
        with self._lock:
            for e in self.events:
                if e.name == name:
                    return e
            sent = [e.name for e in self.events]
        raise AssertionError(f"No analytics event '{name}' sent. Sent: {sent}")

    def get_all(self, name: str) -> list[SentEvent]:
        """Return all sent events matching name."""
        with self._lock:
            return [e for e in self.events if e.name == name]

    def clear(self) -> None:
        """Reset sent events."""
        with self._lock:
            self.events.clear()
