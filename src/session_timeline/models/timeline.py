"""Timeline output models for session-timeline.

This module defines the engine's read-only outputs: turn markers and
action items (together, timeline items), thread nodes, and the
SessionTimeline bundle returned by the pipeline facade.
"""

from typing import Any, Literal

from pydantic import Field, SkipValidation

from session_timeline.models.base import BaseSchema
from session_timeline.models.enums import ActionCategory, ActionStatus, TurnRole

__all__ = [
    "ActionItem",
    "SessionTimeline",
    "ThreadNode",
    "TimelineItem",
    "TurnMarker",
]


class TurnMarker(BaseSchema):
    """Marks the start of a conversational exchange.

    Attributes:
        id: Stable identifier within one build ("turn-{n}").
        role: Who spoke.
        content: Turn text clipped for display.
        timestamp: Epoch seconds, or None when unknown.

    """

    type: Literal["turn"] = "turn"
    id: str
    role: TurnRole
    content: str
    timestamp: float | None = None


class ActionItem(BaseSchema):
    """One entry in the action log.

    Items created from a tool invocation start out pending and are replaced
    by a resolved copy when their outcome arrives; every other item is
    created resolved.

    Attributes:
        id: Stable identifier within one build ("action-{n}").
        timestamp: Epoch seconds, or None when unknown.
        category: Filter category.
        tool_name: Tool identifier or event subtype.
        label: Short human-readable description.
        status: pending, success or error.
        input: Tool input as received.
        output: Tool output or event payload.
        duration: Milliseconds between invocation and outcome, when both are timed.

    """

    type: Literal["action"] = "action"
    id: str
    timestamp: float | None = None
    category: ActionCategory
    tool_name: str
    label: str
    status: ActionStatus
    input: SkipValidation[Any] = None
    output: SkipValidation[Any] = None
    duration: int | None = None

    @property
    def is_pending(self) -> bool:
        """Check whether the item still awaits its outcome."""
        return self.status == ActionStatus.pending


TimelineItem = TurnMarker | ActionItem


class ThreadNode(BaseSchema):
    """Indentation info for one record in a reply thread.

    Attributes:
        id: Record identifier.
        parent_id: Parent identifier, only when the parent is in the input set.
        indent_level: Number of ancestor hops, capped.
        is_child: True when the record has a valid parent and is indented.

    """

    id: str
    parent_id: str | None = None
    indent_level: int = 0
    is_child: bool = False


class SessionTimeline(BaseSchema):
    """Everything the rendering layer needs for one session.

    Attributes:
        items: Ordered timeline items.
        counts: Per-category action counts, every category present.
        threads: Thread nodes keyed by record identifier.

    """

    items: list[TimelineItem] = Field(default_factory=list)
    counts: dict[ActionCategory, int] = Field(default_factory=dict)
    threads: dict[str, ThreadNode] = Field(default_factory=dict)

    @property
    def actions(self) -> list[ActionItem]:
        """Get only the action items, in order."""
        return [item for item in self.items if isinstance(item, ActionItem)]
