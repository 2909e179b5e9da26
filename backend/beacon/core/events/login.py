"""Login screen events."""

from typing import Literal

from beacon.core.events.base import BaseAnalyticsEvent
from beacon.core.events.enums import AnalyticsEventType, LoginFailureReason


class LoginScreenViewed(BaseAnalyticsEvent):
    """The login screen became visible."""

    event_type: Literal[AnalyticsEventType.LOGIN_SCREEN_VIEWED] = (
        AnalyticsEventType.LOGIN_SCREEN_VIEWED
    )


class LoginAttempted(BaseAnalyticsEvent):
    """The user submitted credentials."""

    event_type: Literal[AnalyticsEventType.LOGIN_ATTEMPTED] = AnalyticsEventType.LOGIN_ATTEMPTED


class LoginFailed(BaseAnalyticsEvent):
    """A login attempt was rejected."""

    event_type: Literal[AnalyticsEventType.LOGIN_FAILED] = AnalyticsEventType.LOGIN_FAILED

    reason: LoginFailureReason


class LoginSucceeded(BaseAnalyticsEvent):
    """A login attempt was accepted."""

    event_type: Literal[AnalyticsEventType.LOGIN_SUCCEEDED] = AnalyticsEventType.LOGIN_SUCCEEDED
