"""Reply-thread indentation for flat record lists.

Records reference their parent by identifier. Each record's indentation
is the number of hops up its parent chain, found with a bounded walk that
stops at a missing parent, at the indent cap, or on revisiting a record
already seen in the same walk. Nothing is memoized across calls because
parent links may change between invocations.
"""

from collections import deque
from collections.abc import Iterable, Mapping
from typing import Any

from session_timeline.config.defaults import DEFAULT_MAX_THREAD_INDENT
from session_timeline.models.timeline import ThreadNode

__all__ = ["build_thread_map", "thread_chain"]

_ID_KEYS = ("uuid", "id")
_PARENT_KEYS = ("parent_uuid", "parent_id")


def _lookup(record: Any, keys: tuple[str, ...]) -> str | None:
    for key in keys:
        if isinstance(record, Mapping):
            value = record.get(key)
        else:
            value = getattr(record, key, None)
        if value:
            return str(value)
    return None


def _parent_links(records: Iterable[Any]) -> tuple[list[str], dict[str, str]]:
    """Collect record ids in input order and their parent links."""
    order: list[str] = []
    seen: set[str] = set()
    parent_of: dict[str, str] = {}
    for record in records:
        record_id = _lookup(record, _ID_KEYS)
        if not record_id:
            continue
        if record_id not in seen:
            seen.add(record_id)
            order.append(record_id)
        parent_id = _lookup(record, _PARENT_KEYS)
        if parent_id and parent_id != record_id:
            parent_of[record_id] = parent_id
    return order, parent_of


def build_thread_map(
    records: Iterable[Any],
    max_indent: int = DEFAULT_MAX_THREAD_INDENT,
) -> dict[str, ThreadNode]:
    """Compute indentation for every identified record.

    Records may be mappings or objects exposing ``uuid``/``parent_uuid``
    (or ``id``/``parent_id``). Records without an identifier are left out.

    Args:
        records: Records in display order.
        max_indent: Indentation cap.

    Returns:
        Thread nodes keyed by record identifier, in input order.

    """
    order, parent_of = _parent_links(records)
    present = set(order)

    nodes: dict[str, ThreadNode] = {}
    for record_id in order:
        parent_id = parent_of.get(record_id)
        has_parent = parent_id is not None and parent_id in present

        depth = 0
        visited = {record_id}
        current = record_id
        while depth < max_indent:
            parent = parent_of.get(current)
            if parent is None or parent not in present or parent in visited:
                break
            visited.add(parent)
            depth += 1
            current = parent

        nodes[record_id] = ThreadNode(
            id=record_id,
            parent_id=parent_id if has_parent else None,
            indent_level=depth,
            is_child=has_parent and depth > 0,
        )
    return nodes


def thread_chain(record_id: str, records: Iterable[Any]) -> set[str]:
    """Return a record's whole thread: ancestors and descendants.

    Used to highlight an entire thread on hover. Ancestor walking stops on
    a revisit, so cycles are safe.

    Args:
        record_id: The record to start from.
        records: Records in display order.

    Returns:
        Identifiers in the thread, including ``record_id`` itself.

    """
    _, parent_of = _parent_links(records)
    children_of: dict[str, list[str]] = {}
    for child, parent in parent_of.items():
        children_of.setdefault(parent, []).append(child)

    chain: set[str] = set()
    current: str | None = record_id
    while current and current not in chain:
        chain.add(current)
        current = parent_of.get(current)

    queue = deque([record_id])
    descendants = {record_id}
    while queue:
        node = queue.popleft()
        for child in children_of.get(node, ()):
            if child not in descendants:
                descendants.add(child)
                queue.append(child)

    return chain | descendants
