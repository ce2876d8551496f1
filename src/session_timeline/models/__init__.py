"""Models module for session-timeline.

This module contains the data models used by the timeline engine:
- base: BaseSchema for Pydantic models
- enums: EventKind, ActionCategory, ActionStatus, TurnRole, ContentShape
- records: SessionRecord, ToolCall, HookEventRecord inputs
- events: NormalizedEvent
- metadata: typed progress/system metadata views
- timeline: TurnMarker, ActionItem, ThreadNode, SessionTimeline outputs
"""

from session_timeline.models.base import BaseSchema
from session_timeline.models.enums import (
    ActionCategory,
    ActionStatus,
    ContentShape,
    EventKind,
    TurnRole,
)
from session_timeline.models.events import NormalizedEvent
from session_timeline.models.records import (
    HookEventRecord,
    SessionRecord,
    ToolCall,
    parse_timestamp,
)
from session_timeline.models.timeline import (
    ActionItem,
    SessionTimeline,
    ThreadNode,
    TimelineItem,
    TurnMarker,
)

__all__ = [
    "ActionCategory",
    "ActionItem",
    "ActionStatus",
    "BaseSchema",
    "ContentShape",
    "EventKind",
    "HookEventRecord",
    "NormalizedEvent",
    "SessionRecord",
    "SessionTimeline",
    "ThreadNode",
    "TimelineItem",
    "ToolCall",
    "TurnMarker",
    "TurnRole",
    "parse_timestamp",
]
