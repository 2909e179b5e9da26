"""Beacon message list demo.

A console stand-in for an app screen that logs analytics through an
injected AnalyticsManager. The backend comes from the environment, so the
same screen code runs against the log stream, PostHog or a record store.

Usage:
    ANALYTICS_BACKEND=logging python app.py
"""

from dataclasses import dataclass, field

from beacon.core.analytics_manager import AnalyticsManager
from beacon.core.config import settings
from beacon.core.container import create_container
from beacon.core.events import (
    LoginFailed,
    LoginFailureReason,
    LoginSucceeded,
    MessageDeleted,
    MessageListViewed,
    MessageSelected,
)


@dataclass
class Message:
    subject: str
    read: bool = False


@dataclass
class MessageCollection:
    messages: list[Message] = field(default_factory=list)

    def delete(self, index: int) -> Message:
        return self.messages.pop(index)


class MessageListScreen:
    """Screen that owns a message list and reports what the user does with it."""

    def __init__(self, messages: MessageCollection, analytics: AnalyticsManager) -> None:
        self._messages = messages
        self._analytics = analytics

    def did_appear(self) -> None:
        self._analytics.log(MessageListViewed())

    def select(self, index: int) -> Message:
        message = self._messages.messages[index]
        message.read = True
        self._analytics.log(MessageSelected(index=index))
        return message

    def delete(self, index: int) -> None:
        message = self._messages.delete(index)
        self._analytics.log(MessageDeleted(index=index, read=message.read))


def main() -> None:
    container = create_container(settings)
    analytics = container.analytics

    analytics.log(LoginFailed(reason=LoginFailureReason.WRONG_PASSWORD))
    analytics.log(LoginSucceeded())

    screen = MessageListScreen(
        MessageCollection([Message("Welcome"), Message("Invoice"), Message("Newsletter")]),
        analytics,
    )
    screen.did_appear()
    screen.select(1)
    screen.delete(1)
    screen.delete(0)

    container.close()


if __name__ == "__main__":
    main()
