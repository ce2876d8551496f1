"""Default configuration values for session-timeline.

This module centralizes the display limits used by the timeline engine,
making them easy to discover and modify.
"""

# Preview lengths (characters)
DEFAULT_TURN_PREVIEW_LENGTH = 100
DEFAULT_LABEL_MAX_LENGTH = 60
DEFAULT_TASK_LABEL_MAX_LENGTH = 50
DEFAULT_PROGRESS_PREVIEW_LENGTH = 50
DEFAULT_SUMMARY_LABEL_THRESHOLD = 60

# Threading
DEFAULT_MAX_THREAD_INDENT = 5

# Validation ranges
PREVIEW_LENGTH_MIN = 4
PREVIEW_LENGTH_MAX = 1000
THREAD_INDENT_MIN = 0
THREAD_INDENT_MAX = 20

ELLIPSIS = "..."
