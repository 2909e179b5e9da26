"""Dependency Injection Container.

The container is a simple immutable dataclass that holds protocol implementations.
It has no construction logic; that belongs in the factory.

Design principles:
- Container serves, factory builds
- Fail fast: all construction at startup
- Testing: construct directly with fakes
"""

from dataclasses import dataclass, replace
from typing import Any

from beacon.core.analytics_manager import AnalyticsManager
from beacon.core.protocols import AnalyticsEngine


@dataclass(frozen=True)
class Container:
    """Holds the analytics engine and the manager bound to it."""

    analytics_engine: AnalyticsEngine
    analytics: AnalyticsManager

    @classmethod
    def for_engine(cls, engine: AnalyticsEngine) -> "Container":
        """Build a container whose manager is bound to ``engine``."""
        return cls(analytics_engine=engine, analytics=AnalyticsManager(engine))

    def replace(self, **changes: Any) -> "Container":
        """Return a copy with some fields swapped (tests only).

        Swapping ``analytics_engine`` also rebinds the manager, since a
        manager's engine is fixed once built.
        """
        if "analytics_engine" in changes and "analytics" not in changes:
            changes["analytics"] = AnalyticsManager(changes["analytics_engine"])
        return replace(self, **changes)

    def close(self) -> None:
        """Release engine resources, if the engine holds any."""
        close = getattr(self.analytics_engine, "close", None)
        if callable(close):
            close()
