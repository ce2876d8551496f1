"""One-call facade over the timeline engine.

Wires the components together. Session records are validated once and
shared by the normalizer and the thread map. Live events are appended
after them, hook history is merged in by time, and the resulting stream
is built into a timeline with category counts.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from session_timeline.config.settings import TimelineSettings
from session_timeline.engine.builder import TimelineBuilder
from session_timeline.engine.hooks import (
    hook_events_to_events,
    hook_events_to_progress_events,
)
from session_timeline.engine.merge import merge_by_timestamp
from session_timeline.engine.normalizer import EventNormalizer, read_records
from session_timeline.engine.tally import tally_categories
from session_timeline.engine.threads import build_thread_map
from session_timeline.logging_config import get_logger
from session_timeline.models.events import NormalizedEvent
from session_timeline.models.records import HookEventRecord, SessionRecord
from session_timeline.models.timeline import ActionItem, SessionTimeline

__all__ = ["build_session_timeline"]

logger = get_logger(__name__)


def build_session_timeline(
    records: Iterable[SessionRecord | Mapping[str, Any]],
    hook_events: Iterable[HookEventRecord | Mapping[str, Any]] = (),
    live_events: Iterable[NormalizedEvent] = (),
    *,
    hooks_as_progress: bool = False,
    settings: TimelineSettings | None = None,
) -> SessionTimeline:
    """Build the full timeline view for one session.

    Args:
        records: Persisted session records in store order.
        hook_events: Hook history, sorted by timestamp then id.
        live_events: Already-normalized events received after the records.
        hooks_as_progress: Render hook history as hook_event progress items
            instead of plain hook items.
        settings: Display limits; defaults when omitted.

    Returns:
        Timeline items, per-category counts and thread nodes.

    """
    settings = settings or TimelineSettings()
    session_records = read_records(records)

    events = EventNormalizer().normalize(session_records)
    events.extend(live_events)

    adapt = hook_events_to_progress_events if hooks_as_progress else hook_events_to_events
    merged = merge_by_timestamp(events, adapt(hook_events))

    items = TimelineBuilder(settings).build(merged)
    timeline = SessionTimeline(
        items=items,
        counts=tally_categories(items),
        threads=build_thread_map(session_records, max_indent=settings.max_thread_indent),
    )

    logger.info(
        "timeline_built",
        records=len(session_records),
        events=len(merged),
        items=len(items),
        pending=sum(1 for item in items if isinstance(item, ActionItem) and item.is_pending),
    )
    return timeline
