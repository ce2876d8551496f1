"""Pytest configuration and shared fixtures for the session-timeline test suite.

This module provides sample session records, hook history and settings
used across the unit tests.
"""

from typing import Any

import pytest

from session_timeline.config.settings import TimelineSettings
from session_timeline.models.enums import EventKind
from session_timeline.models.events import NormalizedEvent


@pytest.fixture
def settings() -> TimelineSettings:
    """Provide default display limits, independent of the environment."""
    return TimelineSettings(
        turn_preview_length=100,
        label_max_length=60,
        task_label_max_length=50,
        progress_preview_length=50,
        summary_label_threshold=60,
        max_thread_indent=5,
    )


@pytest.fixture
def session_records() -> list[dict[str, Any]]:
    """Provide a short recorded session in store order.

    Covers a user prompt, an assistant turn with reasoning, a tool call
    with its result, a system notice and a summary.
    """
    return [
        {
            "uuid": "u1",
            "role": "user",
            "content": "Read the config please",
            "timestamp": "2026-02-10T10:00:00Z",
        },
        {
            "uuid": "a1",
            "parent_uuid": "u1",
            "role": "assistant",
            "content": "Sure, reading it now.",
            "thinking": "The user wants the config file.\nI should read it.",
            "timestamp": "2026-02-10T10:00:01Z",
        },
        {
            "uuid": "t1",
            "parent_uuid": "a1",
            "role": "tool_use",
            "content": "",
            "tool_calls": [
                {"name": "Read", "input": {"file_path": "/repo/src/app/config.toml"}},
            ],
            "timestamp": "2026-02-10T10:00:02Z",
        },
        {
            "uuid": "r1",
            "parent_uuid": "t1",
            "role": "tool_result",
            "content": "[server]\nport = 8080",
            "timestamp": "2026-02-10T10:00:02.250Z",
        },
        {
            "uuid": "s1",
            "role": "system",
            "content": "",
            "category": "snapshot",
            "metadata": {"type": "file-history-snapshot"},
            "timestamp": "2026-02-10T10:00:03Z",
        },
        {
            "uuid": "sum1",
            "role": "summary",
            "content": "Read config",
            "metadata": {"summary": "Read config", "leafUuid": "r1"},
        },
    ]


@pytest.fixture
def hook_records() -> list[dict[str, Any]]:
    """Provide hook history rows sorted by timestamp then id."""
    return [
        {
            "id": 1,
            "timestamp": 1770717601.5,
            "eventName": "PreToolUse",
            "toolName": "Read",
            "label": "lint check",
            "group": "autonomous",
        },
        {
            "id": 2,
            "timestamp": 0,
            "eventName": "Stop",
            "label": "session stopped",
            "group": "needs_you",
            "context": "idle",
        },
    ]


def make_event(kind: EventKind | str, content: str = "", **fields: Any) -> NormalizedEvent:
    """Build a normalized event with less ceremony in tests."""
    return NormalizedEvent(kind=EventKind(kind), content=content, **fields)


@pytest.fixture
def event_factory():
    """Provide the make_event helper as a fixture."""
    return make_event
