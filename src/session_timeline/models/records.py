"""Input record models for session-timeline.

This module defines the shapes the timeline engine accepts from its
collaborators: persisted session records (from the paginated store) with
their tool calls, and hook callback records (from hook-event history).
"""

from datetime import UTC, datetime
from typing import Any

from pydantic import AliasChoices, ConfigDict, Field, SkipValidation, field_validator
from pydantic.alias_generators import to_camel

from session_timeline.models.base import BaseSchema

__all__ = ["HookEventRecord", "SessionRecord", "ToolCall", "parse_timestamp"]


def parse_timestamp(value: Any) -> float | None:
    """Convert a raw timestamp to epoch seconds.

    Accepts epoch seconds (int/float or numeric string) and ISO-8601
    strings. Naive ISO timestamps are taken as UTC.

    Args:
        value: The raw timestamp value.

    Returns:
        Epoch seconds, or None when missing, unparseable, or not positive.

    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        seconds = float(value)
    elif isinstance(value, datetime):
        dt = value if value.tzinfo else value.replace(tzinfo=UTC)
        seconds = dt.timestamp()
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            seconds = float(text)
        except ValueError:
            try:
                dt = datetime.fromisoformat(text)
            except ValueError:
                return None
            if dt.tzinfo is None:
                dt = dt.replace(tzinfo=UTC)
            seconds = dt.timestamp()
    else:
        return None
    return seconds if seconds > 0 else None


class ToolCall(BaseSchema):
    """A single tool call attached to a persisted tool-use record.

    Attributes:
        name: Tool identifier (Read, Bash, mcp__server__method, ...).
        input: Structured input passed to the tool, kept as given.
        category: Pre-assigned category tag, if the store provides one.

    """

    name: str
    input: SkipValidation[Any] = None
    category: str | None = None


class SessionRecord(BaseSchema):
    """One persisted session record from the paginated store.

    Attributes:
        role: user, assistant, tool_use, tool_result, system, progress or summary.
        content: Raw text payload.
        thinking: Reasoning text attached to an assistant turn.
        tool_calls: Individual tool calls for a tool_use record.
        metadata: Subtype-specific structured payload, passed through untouched.
        category: Pre-assigned category tag.
        timestamp: Epoch seconds, or None when unknown.
        uuid: Record identifier, used for reply threading.
        parent_uuid: Identifier of the record this one replies to.

    """

    role: str
    content: str = ""
    thinking: str | None = None
    tool_calls: list[ToolCall] | None = None
    metadata: SkipValidation[dict[str, Any] | None] = None
    category: str | None = None
    timestamp: float | None = None
    uuid: str | None = None
    parent_uuid: str | None = Field(
        default=None,
        validation_alias=AliasChoices("parent_uuid", "parentUuid"),
    )

    @field_validator("content", mode="before")
    @classmethod
    def _content_or_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("timestamp", mode="before")
    @classmethod
    def _parse_timestamp(cls, value: Any) -> float | None:
        return parse_timestamp(value)


class HookEventRecord(BaseSchema):
    """A persisted hook callback record.

    History rows arrive sorted by timestamp, then id. A missing timestamp
    is stored as zero, which means "unknown", not the epoch. Missing or
    null text fields read as empty strings.

    Attributes:
        id: Row identifier.
        timestamp: Epoch seconds, zero when unknown.
        event_name: Hook event name (PreToolUse, Stop, SessionStart, ...).
        tool_name: Tool the hook fired for, if any.
        label: Short human description of the callback.
        group: Attention group (e.g. needs_you, autonomous).
        context: Optional extra context captured with the callback.

    """

    model_config = ConfigDict(alias_generator=to_camel)

    id: int | str | None = None
    timestamp: float = 0
    event_name: str = ""
    tool_name: str | None = None
    label: str = ""
    group: str = Field(
        default="",
        validation_alias=AliasChoices("group", "groupName", "group_name"),
    )
    context: str | None = None

    @field_validator("timestamp", mode="before")
    @classmethod
    def _unknown_as_zero(cls, value: Any) -> float:
        return parse_timestamp(value) or 0

    @field_validator("event_name", "label", "group", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value
