"""Hook-event adaptation.

Hook callback history is persisted separately from the session records.
This module re-wraps those records as normalized events so they can be
merged into the primary event stream. The original record rides along
untouched in the event metadata under HOOK_EVENT_KEY. Every input row
yields exactly one event; a row that does not validate is shown as an
unknown hook at its own timestamp.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from session_timeline.logging_config import get_logger
from session_timeline.models.enums import ActionCategory, EventKind
from session_timeline.models.events import NormalizedEvent
from session_timeline.models.records import HookEventRecord

__all__ = [
    "HOOK_EVENT_KEY",
    "HOOK_EVENT_SUBTYPE",
    "UNKNOWN_HOOK_EVENT",
    "hook_event_content",
    "hook_events_to_events",
    "hook_events_to_progress_events",
]

logger = get_logger(__name__)

HOOK_EVENT_SUBTYPE = "hook_event"
HOOK_EVENT_KEY = "hook_event"
UNKNOWN_HOOK_EVENT = "unknown"

HookInput = HookEventRecord | Mapping[str, Any]


def hook_event_content(record: HookEventRecord) -> str:
    """Build the short display string for a hook record."""
    return f"Hook: {record.event_name or UNKNOWN_HOOK_EVENT} — {record.label}"


def _read(raw: HookInput) -> HookEventRecord:
    """Read a hook row, degrading to an empty record that keeps its timestamp."""
    if isinstance(raw, HookEventRecord):
        return raw
    try:
        return HookEventRecord.model_validate(raw)
    except ValidationError as e:
        logger.debug("hook_event_malformed", errors=e.error_count())
    timestamp = raw.get("timestamp") if isinstance(raw, Mapping) else None
    return HookEventRecord(timestamp=timestamp)


def _adapt(raw: HookInput, kind: EventKind) -> NormalizedEvent:
    record = _read(raw)
    return NormalizedEvent(
        kind=kind,
        content=hook_event_content(record),
        timestamp=record.timestamp if record.timestamp > 0 else None,
        tool_name=record.tool_name,
        category_hint=ActionCategory.hook,
        metadata={"type": HOOK_EVENT_SUBTYPE, HOOK_EVENT_KEY: raw},
    )


def hook_events_to_events(records: Iterable[HookInput]) -> list[NormalizedEvent]:
    """Convert hook records into hook-kind normalized events.

    Args:
        records: Hook records (models or raw mappings), sorted by time.

    Returns:
        One event per record, in input order.

    """
    return [_adapt(raw, EventKind.hook) for raw in records]


def hook_events_to_progress_events(
    records: Iterable[HookInput],
) -> list[NormalizedEvent]:
    """Convert hook records into progress events with the hook_event subtype.

    This is the historical-view shape: the builder renders these through
    the structured hook-event progress label ("{event} — {label}").

    Args:
        records: Hook records (models or raw mappings), sorted by time.

    Returns:
        One event per record, in input order.

    """
    return [_adapt(raw, EventKind.progress) for raw in records]
