"""NormalizedEvent model for session-timeline.

A normalized event is the single internal unit the timeline builder
consumes. Session records and hook records are both converted into this
shape before merging.
"""

from typing import Any

from pydantic import SkipValidation

from session_timeline.models.base import BaseSchema
from session_timeline.models.enums import ActionCategory, EventKind

__all__ = ["NormalizedEvent"]


class NormalizedEvent(BaseSchema):
    """A typed session event ready for timeline construction.

    Attributes:
        kind: Event kind, a closed set.
        content: Raw text payload (may be empty).
        timestamp: Epoch seconds, or None when the ordering position is unknown.
        tool_name: Tool identifier, set on tool invocations and hook events.
        input: Raw or structured tool input, passed through unvalidated.
        category_hint: Pre-assigned category that bypasses classification.
        metadata: Kind-specific structured payload, carried by reference.

    """

    kind: EventKind
    content: str = ""
    timestamp: float | None = None
    tool_name: str | None = None
    input: SkipValidation[Any] = None
    category_hint: ActionCategory | None = None
    metadata: SkipValidation[dict[str, Any] | None] = None

