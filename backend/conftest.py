"""Root conftest for pytest configuration and shared fixtures.

This conftest is loaded before both testpaths (tests/ and beacon/),
making its fixtures available to centralized tests AND colocated adapter tests.
"""

import os

import pytest

# ---------------------------------------------------------------------------
# Environment variables: must be set before any beacon module import
# Uses setdefault so real env vars (CI) are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("ANALYTICS_BACKEND", "null")
os.environ.setdefault("LOG_LEVEL", "DEBUG")


# ---------------------------------------------------------------------------
# Shared fake fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_analytics_engine():
    """Fake AnalyticsEngine that records sent events."""
    from beacon.adapters.analytics.fake import FakeAnalyticsEngine

    return FakeAnalyticsEngine()


@pytest.fixture
def analytics_manager(fake_analytics_engine):
    """AnalyticsManager bound to the fake engine."""
    from beacon.core.analytics_manager import AnalyticsManager

    return AnalyticsManager(fake_analytics_engine)


@pytest.fixture
def make_settings():
    """Build Settings from explicit values, ignoring the process environment."""
    from beacon.core.config import Settings

    def _make(**overrides):
        values = {
            "ENVIRONMENT": "test",
            "ANALYTICS_ENABLED": True,
            "ANALYTICS_BACKEND": "null",
            "POSTHOG_API_KEY": None,
            "ANALYTICS_HTTP_BASE_URL": None,
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


# ---------------------------------------------------------------------------
# Test container: fully faked Container for injection
# ---------------------------------------------------------------------------


@pytest.fixture
def test_container(fake_analytics_engine):
    """A Container whose analytics engine is the fake.

    For partial overrides, use container.replace():
        null_container = test_container.replace(analytics_engine=NullAnalyticsEngine())
    """
    from beacon.core.container import Container

    return Container.for_engine(fake_analytics_engine)
