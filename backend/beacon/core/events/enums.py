"""Event type enums: the vocabulary of the analytics layer.

Every analytics event fixes its ``event_type`` to one member of
``AnalyticsEventType``. The member value is the event name sent to engines,
so it must stay stable once events have been recorded under it.

When adding a new event:
1. Add its member here
2. Define the event class (login.py / messages.py) and list it in ALL_EVENT_TYPES
3. Register its metadata encoder in codec.py
"""

from enum import Enum


class AnalyticsEventType(str, Enum):
    """Analytics event names (lowerCamelCase)."""

    LOGIN_SCREEN_VIEWED = "loginScreenViewed"
    LOGIN_ATTEMPTED = "loginAttempted"
    LOGIN_FAILED = "loginFailed"
    LOGIN_SUCCEEDED = "loginSucceeded"
    MESSAGE_LIST_VIEWED = "messageListViewed"
    MESSAGE_SELECTED = "messageSelected"
    MESSAGE_DELETED = "messageDeleted"


class LoginFailureReason(str, Enum):
    """Why a login attempt was rejected.

    Values are sent verbatim as the ``reason`` metadata entry.
    """

    WRONG_PASSWORD = "wrongPassword"
    USER_DOES_NOT_EXIST = "userDoesNotExist"
    USER_NOT_ACTIVATED = "userNotActivated"
