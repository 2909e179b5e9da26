"""Configuration enums for type-safe settings.

These enums provide type safety and IDE autocomplete for configuration values.
They inherit from str to maintain JSON serialization compatibility.
"""

from enum import Enum


class Environment(str, Enum):
    """Deployment environments.

    Controls environment-specific behavior like log output and whether
    network-backed engines actually transmit.
    """

    LOCAL = "local"
    TEST = "test"
    DEV = "dev"
    PRD = "prd"


class AnalyticsBackend(str, Enum):
    """Analytics engine implementations.

    Determines which engine the factory binds to the analytics manager.
    """

    NULL = "null"
    LOGGING = "logging"
    POSTHOG = "posthog"
    HTTP = "http"
