"""Timeline construction and request/response pairing.

The TimelineBuilder walks normalized events strictly in order and emits
turn markers and action items. Tool invocations open pending action items
on a LIFO stack; each tool outcome resolves the most recently opened one.
Pairing is by position, not by identifier, so an outcome that follows two
invocations resolves the second.
"""

from collections.abc import Iterable
from typing import NamedTuple

from session_timeline.config.settings import TimelineSettings
from session_timeline.engine.classifier import categorize_tool
from session_timeline.engine.labels import (
    clip,
    first_line,
    make_label,
    progress_category,
    progress_label,
)
from session_timeline.logging_config import get_logger
from session_timeline.models.enums import (
    ActionCategory,
    ActionStatus,
    EventKind,
    TurnRole,
)
from session_timeline.models.events import NormalizedEvent
from session_timeline.models.metadata import (
    UnknownProgress,
    parse_progress_detail,
    parse_system_notice,
)
from session_timeline.models.timeline import ActionItem, TimelineItem, TurnMarker

__all__ = [
    "ERROR_PREFIXES",
    "ERROR_SUBSTRINGS",
    "TimelineBuilder",
    "build_timeline",
    "is_error_output",
]

logger = get_logger(__name__)

ERROR_PREFIXES = ("Error:", "FAILED")
ERROR_SUBSTRINGS = ("exit code", "Command failed")


def is_error_output(content: str) -> bool:
    """Check whether a tool outcome carries an error signature.

    Args:
        content: The outcome text.

    Returns:
        True if it starts with "Error:" or "FAILED", or mentions
        "exit code" or "Command failed".

    """
    return content.startswith(ERROR_PREFIXES) or any(
        marker in content for marker in ERROR_SUBSTRINGS
    )


class _OpenInvocation(NamedTuple):
    """A pending action item and where it sits in the output list."""

    position: int
    item: ActionItem


class TimelineBuilder:
    """Reduces normalized events into timeline items.

    All state lives for one build() call only: the output list, the
    action id counter, and the stack of open invocations are reset at
    the start of every build, so one builder can be reused safely.

    Example:
        builder = TimelineBuilder()
        items = builder.build(events)

    """

    def __init__(self, settings: TimelineSettings | None = None) -> None:
        """Initialize the builder.

        Args:
            settings: Display limits; defaults when omitted.

        """
        self._settings = settings or TimelineSettings()
        self._items: list[TimelineItem] = []
        self._next_action = 0
        self._open: list[_OpenInvocation] = []

    def build(self, events: Iterable[NormalizedEvent]) -> list[TimelineItem]:
        """Build the timeline for an ordered event sequence.

        Args:
            events: Normalized events in display order.

        Returns:
            Turn markers and action items. Invocations without an outcome
            stay pending.

        """
        self._items = []
        self._next_action = 0
        self._open = []

        for event in events:
            self._apply(event)

        if self._open:
            logger.debug("timeline_unresolved_invocations", count=len(self._open))
        return self._items

    def _apply(self, event: NormalizedEvent) -> None:
        kind = event.kind
        if kind in (EventKind.user, EventKind.assistant):
            self._on_turn(event)
        elif kind == EventKind.thinking:
            self._on_thinking(event)
        elif kind == EventKind.tool_invocation:
            self._on_invocation(event)
        elif kind == EventKind.tool_outcome:
            self._on_outcome(event)
        elif kind == EventKind.progress:
            self._on_progress(event)
        elif kind == EventKind.system:
            self._on_system(event)
        elif kind == EventKind.summary:
            self._on_summary(event)
        elif kind == EventKind.hook:
            self._on_hook(event)
        elif kind == EventKind.error:
            self._on_error(event)

    def _new_action_id(self) -> str:
        action_id = f"action-{self._next_action}"
        self._next_action += 1
        return action_id

    def _append_action(
        self,
        event: NormalizedEvent,
        *,
        category: ActionCategory,
        tool_name: str,
        label: str,
        status: ActionStatus = ActionStatus.success,
        input: object = None,
        output: object = None,
    ) -> ActionItem:
        item = ActionItem(
            id=self._new_action_id(),
            timestamp=event.timestamp,
            category=category,
            tool_name=tool_name,
            label=label,
            status=status,
            input=input,
            output=output,
        )
        self._items.append(item)
        return item

    def _on_turn(self, event: NormalizedEvent) -> None:
        text = event.content.strip()
        if not text:
            return
        self._items.append(
            TurnMarker(
                id=f"turn-{len(self._items)}",
                role=TurnRole(event.kind.value),
                content=clip(text, self._settings.turn_preview_length),
                timestamp=event.timestamp,
            )
        )

    def _on_thinking(self, event: NormalizedEvent) -> None:
        preview = first_line(event.content) or "thinking..."
        self._append_action(
            event,
            category=ActionCategory.system,
            tool_name="thinking",
            label=clip(preview, self._settings.label_max_length),
            output=event.content,
        )

    def _on_invocation(self, event: NormalizedEvent) -> None:
        tool_name = event.tool_name or "tool"
        item = self._append_action(
            event,
            category=event.category_hint or categorize_tool(tool_name),
            tool_name=tool_name,
            label=make_label(tool_name, event.input, self._settings),
            status=ActionStatus.pending,
            input=event.input,
        )
        self._open.append(_OpenInvocation(len(self._items) - 1, item))

    def _on_outcome(self, event: NormalizedEvent) -> None:
        if not self._open:
            logger.debug("tool_outcome_unattached", timestamp=event.timestamp)
            return

        position, pending = self._open.pop()
        duration = None
        if pending.timestamp is not None and event.timestamp is not None:
            duration = round((event.timestamp - pending.timestamp) * 1000)

        status = ActionStatus.error if is_error_output(event.content) else ActionStatus.success
        self._items[position] = pending.model_copy(
            update={"output": event.content, "duration": duration, "status": status}
        )

    def _on_progress(self, event: NormalizedEvent) -> None:
        detail = parse_progress_detail(event.metadata)
        if isinstance(detail, UnknownProgress):
            tool_name = detail.raw_subtype or UnknownProgress.subtype
        else:
            tool_name = detail.subtype
        self._append_action(
            event,
            category=event.category_hint or progress_category(detail),
            tool_name=tool_name,
            label=progress_label(detail, self._settings),
            output=detail.output,
        )

    def _on_system(self, event: NormalizedEvent) -> None:
        subtype = parse_system_notice(event.metadata).subtype
        self._append_action(
            event,
            category=event.category_hint or ActionCategory.system,
            tool_name=subtype or "system",
            label=subtype or "system event",
            output=event.content or None,
        )

    def _on_summary(self, event: NormalizedEvent) -> None:
        summary = ""
        if isinstance(event.metadata, dict):
            value = event.metadata.get("summary")
            summary = value if isinstance(value, str) else ""
        summary = summary or event.content

        if len(summary) > self._settings.summary_label_threshold:
            label = f"Session summary ({len(summary.split())}w)"
        else:
            label = f"Summary: {summary}"
        self._append_action(
            event,
            category=event.category_hint or ActionCategory.system,
            tool_name="summary",
            label=label,
            output=summary,
        )

    def _on_hook(self, event: NormalizedEvent) -> None:
        self._append_action(
            event,
            category=ActionCategory.hook,
            tool_name=event.tool_name or "hook",
            label=clip(event.content, self._settings.label_max_length),
            output=event.input,
        )

    def _on_error(self, event: NormalizedEvent) -> None:
        self._append_action(
            event,
            category=ActionCategory.error,
            tool_name="Error",
            label=clip(event.content, self._settings.label_max_length),
            status=ActionStatus.error,
            output=event.content,
        )


def build_timeline(
    events: Iterable[NormalizedEvent],
    settings: TimelineSettings | None = None,
) -> list[TimelineItem]:
    """Build a timeline with a fresh TimelineBuilder.

    Args:
        events: Normalized events in display order.
        settings: Display limits; defaults when omitted.

    Returns:
        Turn markers and action items.

    """
    return TimelineBuilder(settings).build(events)
