"""Output formatting utilities for CLI.

This module provides functions for formatting a session timeline as
plain text or JSON.
"""

import json
from datetime import UTC, datetime

from session_timeline.models.enums import ActionCategory, ActionStatus
from session_timeline.models.timeline import ActionItem, SessionTimeline, TimelineItem

__all__ = [
    "format_counts",
    "format_item",
    "format_timeline",
]

_STATUS_MARKS = {
    ActionStatus.pending: "…",
    ActionStatus.success: "✓",
    ActionStatus.error: "✗",
}


def _format_time(timestamp: float | None) -> str:
    if timestamp is None:
        return "--:--:--"
    return datetime.fromtimestamp(timestamp, tz=UTC).strftime("%H:%M:%S")


def _format_duration(duration_ms: int | None) -> str:
    if duration_ms is None:
        return ""
    if duration_ms >= 1000:
        return f" ({duration_ms / 1000:.1f}s)"
    return f" ({duration_ms}ms)"


def format_item(item: TimelineItem) -> str:
    """Format a single timeline item as one line of text.

    Args:
        item: A turn marker or action item.

    Returns:
        The formatted line.

    """
    time = _format_time(item.timestamp)
    if isinstance(item, ActionItem):
        mark = _STATUS_MARKS[item.status]
        return (
            f"{time}   {mark} [{item.category.value}] {item.label}"
            f"{_format_duration(item.duration)}"
        )
    first_line = item.content.split("\n", 1)[0]
    return f"{time} {item.role.value.upper()}: {first_line}"


def format_counts(counts: dict[ActionCategory, int]) -> str:
    """Format category counts, skipping empty categories.

    Args:
        counts: Per-category action counts.

    Returns:
        The formatted block.

    """
    lines = ["", "-" * 60, "Categories", "-" * 60]
    used = [(category, count) for category, count in counts.items() if count]
    if not used:
        lines.append("  (no actions)")
    for category, count in used:
        lines.append(f"  {category.value:<14} {count}")
    return "\n".join(lines)


def format_timeline(
    timeline: SessionTimeline,
    items: list[TimelineItem] | None = None,
    json_output: bool = False,
    show_counts: bool = False,
) -> str:
    """Format a session timeline for output.

    Args:
        timeline: The built session timeline.
        items: Items to show, when filtered; defaults to all items.
        json_output: Whether to format as JSON.
        show_counts: Whether to include category counts.

    Returns:
        Formatted string output.

    """
    shown = timeline.items if items is None else items

    if json_output:
        payload: dict[str, object] = {
            "items": [item.model_dump(mode="json") for item in shown],
        }
        if show_counts:
            payload["counts"] = {
                category.value: count for category, count in timeline.counts.items()
            }
        return json.dumps(payload, indent=2, default=str)

    lines = [format_item(item) for item in shown]
    if not lines:
        lines.append("(empty timeline)")
    if show_counts:
        lines.append(format_counts(timeline.counts))
    return "\n".join(lines)
