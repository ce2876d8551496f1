"""Stable two-way merge of time-ordered sequences."""

import math
from collections.abc import Callable, Sequence
from typing import TypeVar

from session_timeline.models.events import NormalizedEvent

__all__ = ["event_sort_key", "merge_by_timestamp"]

T = TypeVar("T")


def event_sort_key(event: NormalizedEvent) -> float | None:
    """Return an event's ordering timestamp, or None when unknown."""
    return event.timestamp


def _position(ts: float | None) -> float:
    # Zero and negative timestamps mean "unknown", never the epoch.
    if ts is None or ts <= 0:
        return math.inf
    return ts


def merge_by_timestamp(
    a: Sequence[T],
    b: Sequence[T],
    key: Callable[[T], float | None] = event_sort_key,
) -> Sequence[T]:
    """Merge two timestamp-sorted sequences into one.

    Both inputs must already be sorted by ``key``, with unknown timestamps
    last. The merge is a single linear pass: on equal timestamps items from
    ``a`` come first, and items with unknown timestamps keep their relative
    order. When either input is empty the other is returned as-is.

    Args:
        a: Primary sequence.
        b: Secondary sequence.
        key: Extracts the timestamp (epoch seconds or None) from an item.

    Returns:
        The merged sequence.

    """
    if not b:
        return a
    if not a:
        return b

    merged: list[T] = []
    ai = bi = 0
    while ai < len(a) and bi < len(b):
        if _position(key(a[ai])) <= _position(key(b[bi])):
            merged.append(a[ai])
            ai += 1
        else:
            merged.append(b[bi])
            bi += 1

    merged.extend(a[ai:])
    merged.extend(b[bi:])
    return merged
