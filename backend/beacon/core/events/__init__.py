"""Analytics events and their encoding."""

from beacon.core.events.base import BaseAnalyticsEvent
from beacon.core.events.catalog import ALL_EVENT_TYPES, AnalyticsEvent
from beacon.core.events.codec import EncodedEvent, encode, metadata, name
from beacon.core.events.enums import AnalyticsEventType, LoginFailureReason
from beacon.core.events.login import (
    LoginAttempted,
    LoginFailed,
    LoginScreenViewed,
    LoginSucceeded,
)
from beacon.core.events.messages import MessageDeleted, MessageListViewed, MessageSelected

__all__ = [
    "ALL_EVENT_TYPES",
    "AnalyticsEvent",
    "AnalyticsEventType",
    "BaseAnalyticsEvent",
    "EncodedEvent",
    "LoginAttempted",
    "LoginFailed",
    "LoginFailureReason",
    "LoginScreenViewed",
    "LoginSucceeded",
    "MessageDeleted",
    "MessageListViewed",
    "MessageSelected",
    "encode",
    "metadata",
    "name",
]
