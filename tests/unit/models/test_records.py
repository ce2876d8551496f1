"""Unit tests for the input record models."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from session_timeline.models.enums import ActionCategory
from session_timeline.models.events import NormalizedEvent
from session_timeline.models.records import HookEventRecord, SessionRecord, parse_timestamp


class TestParseTimestamp:
    """Tests for parse_timestamp()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (100, 100.0),
            (1.5, 1.5),
            ("100", 100.0),
            ("1970-01-01T00:01:40Z", 100.0),
            ("1970-01-01T00:01:40", 100.0),
            ("1970-01-01T01:01:40+01:00", 100.0),
            (datetime(1970, 1, 1, 0, 1, 40, tzinfo=UTC), 100.0),
        ],
    )
    def test_accepted_forms(self, value: object, expected: float) -> None:
        """Test that epoch numbers and ISO strings are converted."""
        assert parse_timestamp(value) == expected

    @pytest.mark.parametrize("value", [None, 0, -5, "", "yesterday", True, [1]])
    def test_unknown_values(self, value: object) -> None:
        """Test that missing, invalid and non-positive values become None."""
        assert parse_timestamp(value) is None


class TestSessionRecord:
    """Tests for SessionRecord."""

    def test_camel_case_parent(self) -> None:
        """Test that parentUuid is accepted as an alias."""
        record = SessionRecord.model_validate({"role": "user", "parentUuid": "p1"})

        assert record.parent_uuid == "p1"

    def test_null_content_becomes_empty(self) -> None:
        """Test that a null content field reads as empty text."""
        record = SessionRecord.model_validate({"role": "assistant", "content": None})

        assert record.content == ""

    def test_role_is_required(self) -> None:
        """Test that a record without a role is rejected."""
        with pytest.raises(ValidationError):
            SessionRecord.model_validate({"content": "x"})

    def test_records_are_frozen(self) -> None:
        """Test that records cannot be mutated."""
        record = SessionRecord(role="user")

        with pytest.raises(ValidationError):
            record.role = "assistant"


class TestHookEventRecord:
    """Tests for HookEventRecord."""

    def test_camel_case_fields(self) -> None:
        """Test that camelCase history rows are read."""
        record = HookEventRecord.model_validate(
            {"eventName": "PreToolUse", "toolName": "Bash", "groupName": "autonomous"}
        )

        assert record.event_name == "PreToolUse"
        assert record.tool_name == "Bash"
        assert record.group == "autonomous"

    def test_null_text_fields_read_as_empty(self) -> None:
        """Test that null or missing text fields become empty strings."""
        record = HookEventRecord.model_validate({"eventName": None, "label": None, "group": None})

        assert record.event_name == ""
        assert record.label == ""
        assert record.group == ""

    def test_missing_timestamp_is_zero(self) -> None:
        """Test that an unknown timestamp is stored as zero."""
        assert HookEventRecord(event_name="Stop").timestamp == 0
        assert HookEventRecord(event_name="Stop", timestamp="garbage").timestamp == 0


class TestNormalizedEvent:
    """Tests for NormalizedEvent."""

    def test_metadata_is_kept_by_reference(self) -> None:
        """Test that metadata is carried without copying."""
        metadata = {"type": "turn_duration", "durationMs": 1200}

        event = NormalizedEvent(kind="system", metadata=metadata)

        assert event.metadata is metadata

    def test_category_hint_is_parsed(self) -> None:
        """Test that a category hint string is converted to the enum."""
        event = NormalizedEvent(kind="tool_invocation", category_hint="mcp")

        assert event.category_hint == ActionCategory.mcp


class TestActionCategoryParse:
    """Tests for ActionCategory.parse()."""

    def test_known_and_unknown(self) -> None:
        """Test that unknown tags parse to None instead of raising."""
        assert ActionCategory.parse("queue") == ActionCategory.queue
        assert ActionCategory.parse("bogus") is None
        assert ActionCategory.parse(None) is None
