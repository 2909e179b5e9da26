"""Dependency wiring: the container and the factory that builds it."""

from beacon.core.container.container import Container
from beacon.core.container.factory import (
    create_analytics_engine,
    create_analytics_manager,
    create_container,
)

__all__ = [
    "Container",
    "create_analytics_engine",
    "create_analytics_manager",
    "create_container",
]
