"""Application settings using pydantic-settings.

Settings can be overridden via environment variables with the
SESSION_TIMELINE_ prefix.

Environment Variables:
    SESSION_TIMELINE_TURN_PREVIEW_LENGTH: Max characters shown for a turn marker
    SESSION_TIMELINE_LABEL_MAX_LENGTH: Max characters for an action label
    SESSION_TIMELINE_TASK_LABEL_MAX_LENGTH: Max characters for a Task label
    SESSION_TIMELINE_PROGRESS_PREVIEW_LENGTH: Max characters for progress previews
    SESSION_TIMELINE_SUMMARY_LABEL_THRESHOLD: Summaries longer than this get a word count label
    SESSION_TIMELINE_MAX_THREAD_INDENT: Indentation cap for threaded replies
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from session_timeline.config.defaults import (
    DEFAULT_LABEL_MAX_LENGTH,
    DEFAULT_MAX_THREAD_INDENT,
    DEFAULT_PROGRESS_PREVIEW_LENGTH,
    DEFAULT_SUMMARY_LABEL_THRESHOLD,
    DEFAULT_TASK_LABEL_MAX_LENGTH,
    DEFAULT_TURN_PREVIEW_LENGTH,
    PREVIEW_LENGTH_MAX,
    PREVIEW_LENGTH_MIN,
    THREAD_INDENT_MAX,
    THREAD_INDENT_MIN,
)

__all__ = [
    "TimelineSettings",
    "get_settings",
]


class TimelineSettings(BaseSettings):
    """Display limits for the timeline engine.

    Attributes:
        turn_preview_length: Max characters shown for a turn marker.
        label_max_length: Max characters for action labels.
        task_label_max_length: Max characters for sub-agent Task labels.
        progress_preview_length: Max characters for progress previews.
        summary_label_threshold: Summaries above this length get a word count label.
        max_thread_indent: Indentation cap for threaded replies.

    """

    model_config = SettingsConfigDict(
        env_prefix="SESSION_TIMELINE_",
        extra="ignore",
        frozen=True,
    )

    turn_preview_length: int = Field(
        default=DEFAULT_TURN_PREVIEW_LENGTH,
        ge=PREVIEW_LENGTH_MIN,
        le=PREVIEW_LENGTH_MAX,
        description="Max characters shown for a turn marker",
    )
    label_max_length: int = Field(
        default=DEFAULT_LABEL_MAX_LENGTH,
        ge=PREVIEW_LENGTH_MIN,
        le=PREVIEW_LENGTH_MAX,
        description="Max characters for an action label",
    )
    task_label_max_length: int = Field(
        default=DEFAULT_TASK_LABEL_MAX_LENGTH,
        ge=PREVIEW_LENGTH_MIN,
        le=PREVIEW_LENGTH_MAX,
        description="Max characters for a sub-agent Task description",
    )
    progress_preview_length: int = Field(
        default=DEFAULT_PROGRESS_PREVIEW_LENGTH,
        ge=PREVIEW_LENGTH_MIN,
        le=PREVIEW_LENGTH_MAX,
        description="Max characters for progress prompt/command previews",
    )
    summary_label_threshold: int = Field(
        default=DEFAULT_SUMMARY_LABEL_THRESHOLD,
        ge=PREVIEW_LENGTH_MIN,
        le=PREVIEW_LENGTH_MAX,
        description="Summaries longer than this are labelled by word count",
    )
    max_thread_indent: int = Field(
        default=DEFAULT_MAX_THREAD_INDENT,
        ge=THREAD_INDENT_MIN,
        le=THREAD_INDENT_MAX,
        description="Indentation cap for threaded replies",
    )


@lru_cache(maxsize=1)
def get_settings() -> TimelineSettings:
    """Get the cached settings singleton.

    Returns:
        The TimelineSettings instance with values from environment variables.

    """
    return TimelineSettings()
