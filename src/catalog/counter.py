"""Active-filter counter used for the filter badge."""

from src.catalog.state import FilterState

MAX_ACTIVE_FILTERS = 7


def count_active_filters(state: FilterState) -> int:
    """
    Count the distinct filter groups that are narrowing the catalog.

    Each group counts once regardless of how many values it holds, so the
    result is at most 7. Sorting and the text search are not filter groups
    and never count.

    Args:
        state: Filter state to inspect.

    Returns:
        Number of active filter groups.
    """
    count = 0
    if state.category_ids:
        count += 1
    if state.locations:
        count += 1
    if state.organic_only:
        count += 1
    if state.local_only:
        count += 1
    if state.fresh_picked_only:
        count += 1
    if state.rating > 0:
        count += 1
    if not state.is_default_price_range:
        count += 1
    return count
