"""Encode analytics events into engine-ready ``(name, metadata)`` pairs.

Names come straight from ``AnalyticsEventType``. Metadata values are always
strings, produced by the canonical formatters below rather than ``str()`` on
arbitrary objects, so two implementations agree byte for byte:

- bool: ``"true"`` / ``"false"``
- int: base-10 ASCII digits, ``-`` prefix only when negative
- enum: its stable value

The encoder table is checked against the catalog when this module is
imported. A variant without an encoder (or an encoder without a variant)
raises ``EventCatalogError`` immediately.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Mapping

from beacon.core.events.base import BaseAnalyticsEvent
from beacon.core.events.catalog import ALL_EVENT_TYPES, AnalyticsEvent
from beacon.core.events.enums import AnalyticsEventType
from beacon.core.events.login import LoginFailed
from beacon.core.events.messages import MessageDeleted, MessageSelected
from beacon.core.exceptions import EventCatalogError, UnknownEventError

MetadataEncoder = Callable[[Any], Dict[str, str]]


@dataclass(frozen=True)
class EncodedEvent:
    """Wire-ready projection of one event."""

    name: str
    metadata: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), hash=False)


# ---------------------------------------------------------------------------
# Canonical value formatting
# ---------------------------------------------------------------------------


def format_bool(value: bool) -> str:
    """Format a boolean as ``true`` or ``false``."""
    if not isinstance(value, bool):
        raise TypeError(f"Expected bool, got {type(value).__name__}")
    return "true" if value else "false"


def format_int(value: int) -> str:
    """Format an integer as plain base-10 ASCII digits."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    return "%d" % value


def format_enum(value: Enum) -> str:
    """Format an enum member by its value."""
    return str(value.value)


# ---------------------------------------------------------------------------
# Per-variant metadata
# ---------------------------------------------------------------------------


def _no_metadata(event: BaseAnalyticsEvent) -> Dict[str, str]:
    return {}


def _login_failed(event: LoginFailed) -> Dict[str, str]:
    return {"reason": format_enum(event.reason)}


def _message_selected(event: MessageSelected) -> Dict[str, str]:
    return {"index": format_int(event.index)}


def _message_deleted(event: MessageDeleted) -> Dict[str, str]:
    return {"index": format_int(event.index), "read": format_bool(event.read)}


_ENCODERS: Dict[AnalyticsEventType, MetadataEncoder] = {
    AnalyticsEventType.LOGIN_SCREEN_VIEWED: _no_metadata,
    AnalyticsEventType.LOGIN_ATTEMPTED: _no_metadata,
    AnalyticsEventType.LOGIN_FAILED: _login_failed,
    AnalyticsEventType.LOGIN_SUCCEEDED: _no_metadata,
    AnalyticsEventType.MESSAGE_LIST_VIEWED: _no_metadata,
    AnalyticsEventType.MESSAGE_SELECTED: _message_selected,
    AnalyticsEventType.MESSAGE_DELETED: _message_deleted,
}


def verify_catalog(
    event_classes: Iterable[type[BaseAnalyticsEvent]],
    encoders: Mapping[AnalyticsEventType, MetadataEncoder],
) -> None:
    """Check that event classes, event types and encoders line up one to one.

    Raises:
        EventCatalogError: On a missing, duplicate or orphaned entry.
    """
    covered: Dict[AnalyticsEventType, str] = {}
    for event_cls in event_classes:
        event_type = event_cls.model_fields["event_type"].default
        if not isinstance(event_type, AnalyticsEventType):
            raise EventCatalogError(f"{event_cls.__name__} does not pin an event_type")
        if event_type in covered:
            raise EventCatalogError(
                f"{event_cls.__name__} and {covered[event_type]} share '{event_type.value}'"
            )
        if not event_type.value:
            raise EventCatalogError(f"{event_cls.__name__} has an empty event name")
        covered[event_type] = event_cls.__name__

    all_types = set(AnalyticsEventType)
    without_class = all_types - set(covered)
    if without_class:
        names = sorted(t.value for t in without_class)
        raise EventCatalogError(f"Event types without an event class: {names}")

    without_encoder = all_types - set(encoders)
    if without_encoder:
        names = sorted(t.value for t in without_encoder)
        raise EventCatalogError(f"Event types without a metadata encoder: {names}")

    orphaned = set(encoders) - all_types
    if orphaned:
        raise EventCatalogError(f"Encoders for unknown event types: {sorted(map(str, orphaned))}")


verify_catalog(ALL_EVENT_TYPES, _ENCODERS)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def _require_event(event: object) -> BaseAnalyticsEvent:
    if not isinstance(event, ALL_EVENT_TYPES):
        raise UnknownEventError(event)
    return event


def name(event: AnalyticsEvent) -> str:
    """Return the event name, identical for every instance of a variant."""
    return _require_event(event).event_type.value


def metadata(event: AnalyticsEvent) -> Dict[str, str]:
    """Return the event payload as a fresh string-to-string mapping."""
    checked = _require_event(event)
    return _ENCODERS[checked.event_type](checked)


def encode(event: AnalyticsEvent) -> EncodedEvent:
    """Return name and metadata together."""
    return EncodedEvent(name=name(event), metadata=MappingProxyType(metadata(event)))
