"""Unit tests for hook-event adaptation."""

from session_timeline.engine.hooks import (
    HOOK_EVENT_KEY,
    HOOK_EVENT_SUBTYPE,
    hook_event_content,
    hook_events_to_events,
    hook_events_to_progress_events,
)
from session_timeline.models.enums import ActionCategory, EventKind
from session_timeline.models.records import HookEventRecord


class TestHookEventsToEvents:
    """Tests for hook_events_to_events()."""

    def test_one_event_per_record(self, hook_records: list[dict]) -> None:
        """Test that every readable record yields one hook event."""
        events = hook_events_to_events(hook_records)

        assert [e.kind for e in events] == [EventKind.hook, EventKind.hook]
        assert events[0].content == "Hook: PreToolUse — lint check"
        assert events[0].tool_name == "Read"
        assert events[0].category_hint == ActionCategory.hook

    def test_zero_timestamp_means_unknown(self, hook_records: list[dict]) -> None:
        """Test that a zero timestamp becomes None, not the epoch."""
        events = hook_events_to_events(hook_records)

        assert events[0].timestamp == 1770717601.5
        assert events[1].timestamp is None

    def test_original_record_rides_along(self, hook_records: list[dict]) -> None:
        """Test that the original record is kept by reference in metadata."""
        events = hook_events_to_events(hook_records)

        assert events[0].metadata["type"] == HOOK_EVENT_SUBTYPE
        assert events[0].metadata[HOOK_EVENT_KEY] is hook_records[0]

    def test_accepts_model_instances(self) -> None:
        """Test that HookEventRecord instances are accepted as-is."""
        record = HookEventRecord(event_name="SessionStart", timestamp=5)

        events = hook_events_to_events([record])

        assert events[0].content == "Hook: SessionStart — "
        assert events[0].metadata[HOOK_EVENT_KEY] is record

    def test_null_text_fields_are_tolerated(self) -> None:
        """Test that null label and group still yield a full hook event."""
        events = hook_events_to_events(
            [{"id": 1, "timestamp": 5, "eventName": "Stop", "label": None, "group": None}]
        )

        assert len(events) == 1
        assert events[0].content == "Hook: Stop — "
        assert events[0].timestamp == 5.0

    def test_record_without_event_name_is_kept(self) -> None:
        """Test that a row missing its event name is shown as unknown."""
        events = hook_events_to_events([{"id": 2, "timestamp": 5, "label": "x"}])

        assert len(events) == 1
        assert events[0].content == "Hook: unknown — x"

    def test_malformed_record_keeps_raw_row(self) -> None:
        """Test that a row failing validation degrades but is never dropped."""
        raw = {"id": 3, "timestamp": 7, "eventName": "Stop", "toolName": ["Bash"]}

        events = hook_events_to_events([raw, {"eventName": "Stop"}])

        assert len(events) == 2
        assert events[0].content == "Hook: unknown — "
        assert events[0].timestamp == 7.0
        assert events[0].tool_name is None
        assert events[0].metadata[HOOK_EVENT_KEY] is raw

    def test_empty_input(self) -> None:
        """Test that no records yield no events."""
        assert hook_events_to_events([]) == []


class TestHookEventsToProgressEvents:
    """Tests for hook_events_to_progress_events()."""

    def test_progress_kind_with_hook_event_subtype(self, hook_records: list[dict]) -> None:
        """Test that records become progress events tagged hook_event."""
        events = hook_events_to_progress_events(hook_records)

        assert all(e.kind == EventKind.progress for e in events)
        assert all(e.metadata["type"] == HOOK_EVENT_SUBTYPE for e in events)


class TestHookEventContent:
    """Tests for hook_event_content()."""

    def test_format(self) -> None:
        """Test the display string layout."""
        record = HookEventRecord(event_name="Notification", label="needs input")

        assert hook_event_content(record) == "Hook: Notification — needs input"
