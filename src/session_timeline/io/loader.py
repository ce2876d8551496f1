"""Loaders for session records and hook history files.

Session records are stored as JSONL, one JSON object per line. Hook
history is a JSON array of objects, or JSONL. Malformed lines are skipped
and logged; a missing file or a wrong top-level shape raises
RecordLoadError.
"""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from session_timeline.io.exceptions import RecordLoadError
from session_timeline.logging_config import get_logger

__all__ = ["iter_jsonl", "load_hook_events", "load_session_records"]

logger = get_logger(__name__)


def iter_jsonl(path: Path) -> Iterator[dict[str, Any]]:
    """Iterate over the JSON objects in a JSONL file.

    Blank lines, malformed lines and non-object values are skipped.

    Args:
        path: Path to the JSONL file.

    Yields:
        One dict per readable line.

    Raises:
        RecordLoadError: If the file cannot be read.

    """
    try:
        with open(path, encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    data = json.loads(line)
                except json.JSONDecodeError:
                    logger.debug("jsonl_line_malformed", path=str(path), line=line_number)
                    continue
                if isinstance(data, dict):
                    yield data
                else:
                    logger.debug("jsonl_line_not_object", path=str(path), line=line_number)
    except OSError as e:
        raise RecordLoadError(f"Failed to read records from {path}: {e}") from e


def load_session_records(path: Path) -> list[dict[str, Any]]:
    """Load persisted session records from a JSONL file.

    Args:
        path: Path to the session JSONL file.

    Returns:
        Raw record mappings in file order.

    Raises:
        RecordLoadError: If the file cannot be read.

    """
    records = list(iter_jsonl(path))
    logger.debug("session_records_loaded", path=str(path), count=len(records))
    return records


def load_hook_events(path: Path) -> list[dict[str, Any]]:
    """Load hook history from a JSON array file or a JSONL file.

    Args:
        path: Path to the hook history file.

    Returns:
        Raw hook record mappings in file order.

    Raises:
        RecordLoadError: If the file cannot be read or is not an array.

    """
    if path.suffix == ".jsonl":
        return list(iter_jsonl(path))

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise RecordLoadError(f"Failed to parse hook events from {path}: {e}") from e
    except OSError as e:
        raise RecordLoadError(f"Failed to read hook events from {path}: {e}") from e

    if not isinstance(data, list):
        raise RecordLoadError(
            f"Hook events in {path} must be a JSON array, got {type(data).__name__}"
        )
    events = [item for item in data if isinstance(item, dict)]
    if len(events) != len(data):
        logger.warning(
            "hook_events_skipped",
            path=str(path),
            skipped=len(data) - len(events),
        )
    return events
