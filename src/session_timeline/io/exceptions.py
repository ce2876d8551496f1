"""Domain-specific exceptions for record loading.

This module defines exceptions raised while reading session records and
hook history from disk.
"""

from session_timeline.exceptions import SessionTimelineError

__all__ = ["RecordLoadError"]


class RecordLoadError(SessionTimelineError):
    """Exception for unreadable or wrongly shaped record files."""

    pass
