"""Core protocols for dependency injection."""

from beacon.core.protocols.analytics import AnalyticsEngine

__all__ = [
    "AnalyticsEngine",
]
