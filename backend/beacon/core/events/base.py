"""Base class for all analytics events.

Enforces that every event is a validated, frozen Pydantic model. Subclasses
pin ``event_type`` to a single ``AnalyticsEventType`` member and declare
their payload fields.
"""

from pydantic import BaseModel, ConfigDict

from beacon.core.events.enums import AnalyticsEventType


class BaseAnalyticsEvent(BaseModel):
    """Base for all analytics events.

    Events are plain values: frozen, no extra fields, compared by content.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    event_type: AnalyticsEventType
