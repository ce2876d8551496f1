"""File loading for session records and hook history."""

from session_timeline.io.exceptions import RecordLoadError
from session_timeline.io.loader import iter_jsonl, load_hook_events, load_session_records

__all__ = [
    "RecordLoadError",
    "iter_jsonl",
    "load_hook_events",
    "load_session_records",
]
