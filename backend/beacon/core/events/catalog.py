"""The closed set of analytics events."""

from typing import Union, get_args

from beacon.core.events.base import BaseAnalyticsEvent
from beacon.core.events.login import (
    LoginAttempted,
    LoginFailed,
    LoginScreenViewed,
    LoginSucceeded,
)
from beacon.core.events.messages import MessageDeleted, MessageListViewed, MessageSelected

AnalyticsEvent = Union[
    LoginScreenViewed,
    LoginAttempted,
    LoginFailed,
    LoginSucceeded,
    MessageListViewed,
    MessageSelected,
    MessageDeleted,
]

# Every event class, in declaration order, derived from the union so the two
# cannot drift. The codec checks it against AnalyticsEventType and its encoder
# table at import time.
ALL_EVENT_TYPES: tuple[type[BaseAnalyticsEvent], ...] = get_args(AnalyticsEvent)
