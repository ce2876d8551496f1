"""Event normalization for persisted session records.

This module converts records from the paginated session store into the
engine's NormalizedEvent shape. Each record yields zero, one or two
events per role (an assistant turn with reasoning yields a thinking event
followed by the assistant event), and tool-use records yield one event per
attached tool call.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from session_timeline.logging_config import get_logger
from session_timeline.models.enums import ActionCategory, EventKind
from session_timeline.models.events import NormalizedEvent
from session_timeline.models.records import SessionRecord

__all__ = [
    "FALLBACK_TOOL_NAME",
    "EventNormalizer",
    "normalize_records",
    "read_record",
    "read_records",
    "strip_control_markup",
]

logger = get_logger(__name__)

FALLBACK_TOOL_NAME = "tool"

_CONTROL_TAGS = (
    "command-name",
    "command-message",
    "command-args",
    "local-command-stdout",
    "system-reminder",
)
_CONTROL_MARKUP_RE = re.compile(
    "|".join(rf"<{tag}>.*?</{tag}>" for tag in _CONTROL_TAGS),
    re.DOTALL,
)

_TOOL_INVOCATION_ROLES = frozenset({"tool_use", "tool_invocation"})
_TOOL_OUTCOME_ROLES = frozenset({"tool_result", "tool_outcome"})


def read_record(raw: SessionRecord | Mapping[str, Any]) -> SessionRecord | None:
    """Validate one raw record, or return None when it cannot be read."""
    if isinstance(raw, SessionRecord):
        return raw
    try:
        return SessionRecord.model_validate(raw)
    except ValidationError as e:
        logger.debug("record_unreadable", errors=e.error_count())
        return None


def read_records(
    records: Iterable[SessionRecord | Mapping[str, Any]],
) -> list[SessionRecord]:
    """Validate raw records, skipping the ones that cannot be read.

    Args:
        records: Session records or their raw mappings, in store order.

    Returns:
        The readable records as models, in the same order.

    """
    readable = (read_record(raw) for raw in records)
    return [record for record in readable if record is not None]


def strip_control_markup(text: str | None) -> str:
    """Remove internal control blocks from text and trim it.

    Args:
        text: Raw record text.

    Returns:
        The visible text, possibly empty.

    """
    if not text:
        return ""
    return _CONTROL_MARKUP_RE.sub("", text).strip()


class EventNormalizer:
    """Converts persisted session records into normalized events.

    The only state is the category of the most recent tool invocation,
    which is attached to the following tool outcome as a continuity hint.
    It is reset at the start of every normalize() call.
    """

    def __init__(self) -> None:
        """Initialize the normalizer."""
        self._last_tool_category: ActionCategory | None = None

    def normalize(
        self, records: Iterable[SessionRecord | Mapping[str, Any]]
    ) -> list[NormalizedEvent]:
        """Normalize a sequence of session records.

        Records that cannot be read as a SessionRecord, and records with a
        role that has no mapping, are skipped.

        Args:
            records: Session records or their raw mappings, in store order.

        Returns:
            Normalized events in the same order.

        """
        self._last_tool_category = None
        events: list[NormalizedEvent] = []
        for raw in records:
            record = read_record(raw)
            if record is not None:
                events.extend(self.normalize_record(record))
        return events

    def normalize_record(self, record: SessionRecord) -> list[NormalizedEvent]:
        """Normalize a single record.

        Args:
            record: The session record.

        Returns:
            Zero or more normalized events for this record.

        """
        events: list[NormalizedEvent] = []
        ts = record.timestamp

        thinking = strip_control_markup(record.thinking)
        if thinking:
            events.append(
                NormalizedEvent(kind=EventKind.thinking, content=thinking, timestamp=ts)
            )

        role = record.role
        if role in ("user", "assistant"):
            content = strip_control_markup(record.content)
            if content:
                events.append(
                    NormalizedEvent(kind=EventKind(role), content=content, timestamp=ts)
                )

        elif role in _TOOL_INVOCATION_ROLES:
            events.extend(self._tool_invocations(record))

        elif role in _TOOL_OUTCOME_ROLES:
            content = strip_control_markup(record.content)
            if content:
                events.append(
                    NormalizedEvent(
                        kind=EventKind.tool_outcome,
                        content=content,
                        timestamp=ts,
                        category_hint=self._last_tool_category,
                    )
                )

        elif role in ("system", "progress"):
            events.append(
                NormalizedEvent(
                    kind=EventKind(role),
                    content=strip_control_markup(record.content),
                    timestamp=ts,
                    category_hint=ActionCategory.parse(record.category),
                    metadata=record.metadata,
                )
            )

        elif role == "summary":
            content = record.content
            if not content and isinstance(record.metadata, dict):
                summary = record.metadata.get("summary")
                content = summary if isinstance(summary, str) else ""
            events.append(
                NormalizedEvent(
                    kind=EventKind.summary,
                    content=content,
                    timestamp=ts,
                    metadata=record.metadata,
                )
            )

        else:
            logger.debug("record_role_unmapped", role=role, uuid=record.uuid)

        return events

    def _tool_invocations(self, record: SessionRecord) -> list[NormalizedEvent]:
        """Emit one invocation per tool call, or one fallback for legacy records."""
        events: list[NormalizedEvent] = []
        if not record.tool_calls:
            category = ActionCategory.parse(record.category) or ActionCategory.builtin
            events.append(
                NormalizedEvent(
                    kind=EventKind.tool_invocation,
                    timestamp=record.timestamp,
                    tool_name=FALLBACK_TOOL_NAME,
                    input=record.content or None,
                    category_hint=category,
                )
            )
            self._last_tool_category = category
            return events

        for call in record.tool_calls:
            category = ActionCategory.parse(call.category) or ActionCategory.builtin
            events.append(
                NormalizedEvent(
                    kind=EventKind.tool_invocation,
                    timestamp=record.timestamp,
                    tool_name=call.name,
                    input=call.input,
                    category_hint=category,
                )
            )
            self._last_tool_category = category
        return events


def normalize_records(
    records: Iterable[SessionRecord | Mapping[str, Any]],
) -> list[NormalizedEvent]:
    """Normalize session records with a fresh EventNormalizer.

    Args:
        records: Session records or their raw mappings, in store order.

    Returns:
        Normalized events in the same order.

    """
    return EventNormalizer().normalize(records)
