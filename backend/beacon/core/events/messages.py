"""Message list events.

``index`` is always the position of the message in the list as shown to
the user at the time of the action.
"""

from typing import Literal

from pydantic import StrictBool, StrictInt

from beacon.core.events.base import BaseAnalyticsEvent
from beacon.core.events.enums import AnalyticsEventType


class MessageListViewed(BaseAnalyticsEvent):
    """The message list became visible."""

    event_type: Literal[AnalyticsEventType.MESSAGE_LIST_VIEWED] = (
        AnalyticsEventType.MESSAGE_LIST_VIEWED
    )


class MessageSelected(BaseAnalyticsEvent):
    """A message was opened from the list."""

    event_type: Literal[AnalyticsEventType.MESSAGE_SELECTED] = AnalyticsEventType.MESSAGE_SELECTED

    index: StrictInt


class MessageDeleted(BaseAnalyticsEvent):
    """A message was deleted from the list."""

    event_type: Literal[AnalyticsEventType.MESSAGE_DELETED] = AnalyticsEventType.MESSAGE_DELETED

    index: StrictInt
    read: StrictBool
