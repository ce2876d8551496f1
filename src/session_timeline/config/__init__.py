"""Configuration for session-timeline.

Centralized settings via pydantic-settings, with defaults in
session_timeline.config.defaults.
"""

from session_timeline.config.settings import TimelineSettings, get_settings

__all__ = [
    "get_settings",
    "TimelineSettings",
]
