"""Timeline synthesis engine.

Components, leaf first:
- classifier: tool name to category
- content: payload shape and language heuristics
- normalizer: session records to normalized events
- hooks: hook history to normalized events
- merge: stable merge by timestamp
- builder: pairing state machine producing timeline items
- tally: per-category counts and filtering
- threads: reply-thread indentation
- pipeline: one-call facade
"""

from session_timeline.engine.builder import TimelineBuilder, build_timeline, is_error_output
from session_timeline.engine.classifier import categorize_tool, shorten_tool_name
from session_timeline.engine.content import (
    classify_content,
    guess_language,
    looks_like_diff,
    looks_like_json,
    looks_like_line_numbered,
    strip_line_numbers,
    try_parse_json,
)
from session_timeline.engine.hooks import hook_events_to_events, hook_events_to_progress_events
from session_timeline.engine.merge import event_sort_key, merge_by_timestamp
from session_timeline.engine.normalizer import (
    EventNormalizer,
    normalize_records,
    read_records,
    strip_control_markup,
)
from session_timeline.engine.pipeline import build_session_timeline
from session_timeline.engine.tally import filter_timeline, tally_categories
from session_timeline.engine.threads import build_thread_map, thread_chain

__all__ = [
    "EventNormalizer",
    "TimelineBuilder",
    "build_session_timeline",
    "build_thread_map",
    "build_timeline",
    "categorize_tool",
    "classify_content",
    "event_sort_key",
    "filter_timeline",
    "guess_language",
    "hook_events_to_events",
    "hook_events_to_progress_events",
    "is_error_output",
    "looks_like_diff",
    "looks_like_json",
    "looks_like_line_numbered",
    "merge_by_timestamp",
    "normalize_records",
    "read_records",
    "shorten_tool_name",
    "strip_control_markup",
    "strip_line_numbers",
    "tally_categories",
    "thread_chain",
    "try_parse_json",
]
