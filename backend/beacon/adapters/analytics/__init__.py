"""Analytics engine adapters.

Implements the AnalyticsEngine protocol for each supported backend.
"""

from beacon.adapters.analytics.fake import FakeAnalyticsEngine, SentEvent
from beacon.adapters.analytics.http_record import HttpRecordAnalyticsEngine
from beacon.adapters.analytics.logging_engine import LoggingAnalyticsEngine
from beacon.adapters.analytics.null import NullAnalyticsEngine
from beacon.adapters.analytics.posthog import PostHogAnalyticsEngine

__all__ = [
    "FakeAnalyticsEngine",
    "HttpRecordAnalyticsEngine",
    "LoggingAnalyticsEngine",
    "NullAnalyticsEngine",
    "PostHogAnalyticsEngine",
    "SentEvent",
]
