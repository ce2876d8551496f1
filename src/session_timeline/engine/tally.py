"""Category tallies and filtering over emitted timeline items."""

from collections.abc import Iterable

from session_timeline.models.enums import ActionCategory
from session_timeline.models.timeline import ActionItem, TimelineItem

__all__ = ["filter_timeline", "tally_categories"]


def tally_categories(items: Iterable[TimelineItem]) -> dict[ActionCategory, int]:
    """Count action items per category.

    Every category is present in the result, zero when unused; turn
    markers are not counted.

    Args:
        items: Timeline items.

    Returns:
        Mapping of category to count.

    """
    counts = {category: 0 for category in ActionCategory}
    for item in items:
        if isinstance(item, ActionItem):
            counts[item.category] += 1
    return counts


def filter_timeline(
    items: Iterable[TimelineItem],
    category: ActionCategory | None = None,
) -> list[TimelineItem]:
    """Keep the action items of one category, plus every turn marker.

    Args:
        items: Timeline items.
        category: Category to keep, or None for everything.

    Returns:
        The filtered items in their original order.

    """
    if category is None:
        return list(items)
    return [
        item
        for item in items
        if not isinstance(item, ActionItem) or item.category == category
    ]
