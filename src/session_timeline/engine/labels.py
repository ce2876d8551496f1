"""Label synthesis for timeline action items.

Builds the short human label shown for each action: tool invocation
labels from structured tool input, and progress labels from the typed
progress metadata views.
"""

import json
from collections.abc import Mapping
from typing import Any, assert_never

from session_timeline.config.defaults import ELLIPSIS
from session_timeline.config.settings import TimelineSettings
from session_timeline.engine.classifier import MCP_PREFIX
from session_timeline.models.enums import ActionCategory
from session_timeline.models.metadata import (
    AgentProgress,
    BashProgress,
    HookEventProgress,
    HookProgress,
    McpProgress,
    ProgressDetail,
    UnknownProgress,
    WaitingForTask,
)

__all__ = [
    "clip",
    "first_line",
    "make_label",
    "progress_category",
    "progress_label",
]

FILE_TOOLS = frozenset({"Read", "Write", "Edit"})


def clip(text: str, limit: int) -> str:
    """Truncate text to ``limit`` characters, ending with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[: max(limit - len(ELLIPSIS), 0)] + ELLIPSIS


def first_line(text: str) -> str:
    """Return the first line of text."""
    return text.split("\n", 1)[0]


def _parse_input(tool_input: Any) -> Mapping[str, Any] | None:
    if isinstance(tool_input, Mapping):
        return tool_input
    if not isinstance(tool_input, str) or not tool_input:
        return None
    try:
        parsed = json.loads(tool_input)
    except ValueError:
        return None
    return parsed if isinstance(parsed, Mapping) else None


def _field(data: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = data.get(key)
        if isinstance(value, str) and value:
            return value
    return ""


def _short_path(path: str) -> str:
    parts = path.split("/")
    if len(parts) > 2:
        return ".../" + "/".join(parts[-2:])
    return path


def make_label(tool_name: str, tool_input: Any, settings: TimelineSettings) -> str:
    """Build the label for a tool invocation.

    Structured input may be a mapping or a JSON string. Missing or
    malformed input falls back to the bare tool name.

    Args:
        tool_name: The tool identifier.
        tool_input: The tool's input as received.
        settings: Display limits.

    Returns:
        A short human-readable label.

    """
    data = _parse_input(tool_input)
    if data is None:
        return tool_name

    if tool_name in FILE_TOOLS:
        return f"{tool_name} {_short_path(_field(data, 'file_path', 'path'))}"

    if tool_name == "Bash":
        return clip(first_line(_field(data, "command", "cmd")), settings.label_max_length)

    if tool_name == "Grep":
        return f'Grep "{_field(data, "pattern")}"'
    if tool_name == "Glob":
        return f"Glob {_field(data, 'pattern')}"

    if tool_name == "Skill":
        return f"Skill: {_field(data, 'skill', 'name') or 'unknown'}"

    if tool_name == "Task":
        description = _field(data, "description", "prompt")
        return f"Task: {clip(description, settings.task_label_max_length)}"

    if tool_name.startswith(MCP_PREFIX):
        parts = tool_name.split("__")
        if len(parts) >= 3:
            return f"{parts[-2]}:{parts[-1]}"

    return tool_name


def progress_category(detail: ProgressDetail) -> ActionCategory:
    """Map a progress subtype to its category."""
    if isinstance(detail, AgentProgress):
        return ActionCategory.agent
    if isinstance(detail, BashProgress):
        return ActionCategory.builtin
    if isinstance(detail, McpProgress):
        return ActionCategory.mcp
    if isinstance(detail, HookProgress):
        return ActionCategory.hook_progress
    if isinstance(detail, HookEventProgress):
        return ActionCategory.hook
    if isinstance(detail, WaitingForTask):
        return ActionCategory.queue
    if isinstance(detail, UnknownProgress):
        return ActionCategory.system
    assert_never(detail)


def progress_label(detail: ProgressDetail, settings: TimelineSettings) -> str:
    """Build the label for a progress action item.

    Never blank: unknown subtypes are labelled with the subtype itself.
    """
    limit = settings.progress_preview_length
    if isinstance(detail, AgentProgress):
        return f"Agent: {detail.prompt[:limit]}" if detail.prompt else "Agent progress"
    if isinstance(detail, BashProgress):
        if detail.command:
            return f"$ {first_line(detail.command)[:limit]}"
        return "Bash progress"
    if isinstance(detail, McpProgress):
        return f"{detail.server}:{detail.method or ''}" if detail.server else "MCP progress"
    if isinstance(detail, HookProgress):
        name = detail.hook_event or detail.hook_name
        if detail.command:
            return f"{name or 'hook'} → {detail.command}"
        return name or "hook progress"
    if isinstance(detail, HookEventProgress):
        record = detail.hook_event
        if record is None or not record.event_name:
            return "Hook event"
        return f"{record.event_name} — {record.label}"
    if isinstance(detail, WaitingForTask):
        position = "?" if detail.position is None else detail.position
        return f"Waiting (pos {position})"
    if isinstance(detail, UnknownProgress):
        return detail.raw_subtype or UnknownProgress.subtype
    assert_never(detail)
