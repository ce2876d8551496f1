"""Enumeration types for session-timeline.

This module defines the closed tag sets used by the timeline engine:
normalized event kinds, action categories, action statuses and turn roles.
"""

from enum import Enum

__all__ = [
    "ActionCategory",
    "ActionStatus",
    "ContentShape",
    "EventKind",
    "TurnRole",
]


class EventKind(str, Enum):
    """Kind of a normalized event consumed by the timeline builder.

    Attributes:
        user: A user conversational turn.
        assistant: An assistant conversational turn.
        thinking: An assistant reasoning block.
        tool_invocation: A tool call request.
        tool_outcome: The result of a tool call.
        system: A system notice (snapshots, queue operations, durations).
        progress: A progress notification (agents, shell, MCP, hooks).
        summary: A session summary.
        hook: A hook callback from the live transport.
        error: An error reported by the session.
    """

    user = "user"
    assistant = "assistant"
    thinking = "thinking"
    tool_invocation = "tool_invocation"
    tool_outcome = "tool_outcome"
    system = "system"
    progress = "progress"
    summary = "summary"
    hook = "hook"
    error = "error"


class ActionCategory(str, Enum):
    """Category tag used for filtering and display grouping of actions."""

    skill = "skill"
    mcp = "mcp"
    builtin = "builtin"
    agent = "agent"
    error = "error"
    hook = "hook"
    hook_progress = "hook_progress"
    system = "system"
    snapshot = "snapshot"
    queue = "queue"
    context = "context"
    result = "result"
    summary = "summary"

    @classmethod
    def parse(cls, value: object) -> "ActionCategory | None":
        """Convert a raw category value, returning None when unrecognized."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class ActionStatus(str, Enum):
    """Resolution status of an action item.

    Attributes:
        pending: Invocation seen, outcome not yet paired.
        success: Resolved without an error signature.
        error: Resolved with an error signature.
    """

    pending = "pending"
    success = "success"
    error = "error"


class TurnRole(str, Enum):
    """Role of a conversational turn marker."""

    user = "user"
    assistant = "assistant"


class ContentShape(str, Enum):
    """How an opaque text payload should be interpreted.

    Attributes:
        json: A JSON object or array.
        diff: A unified diff or patch.
        line_numbered: A file listing with line-number prefixes.
        text: Anything else.
    """

    json = "json"
    diff = "diff"
    line_numbered = "line_numbered"
    text = "text"
