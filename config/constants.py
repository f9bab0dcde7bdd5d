"""Constants for the UrbanFood catalog.

IMPORTANT: Default filters are EMPTY (all categories/locations, any rating).
The default price range spans the full bounds so it excludes nothing.
"""

from typing import Dict, List, Tuple


# =============================================================================
# Price Bounds (LKR)
# =============================================================================

PRICE_FLOOR: float = 0
PRICE_CEILING: float = 5000
DEFAULT_PRICE_RANGE: Tuple[float, float] = (PRICE_FLOOR, PRICE_CEILING)


# =============================================================================
# Rating
# =============================================================================

MIN_RATING = 0  # 0 = any rating
MAX_RATING = 5


# =============================================================================
# Sorting
# =============================================================================

SORT_FEATURED = "featured"
SORT_PRICE_LOW = "price-low"
SORT_PRICE_HIGH = "price-high"
SORT_NEWEST = "newest"

SORT_OPTIONS: Dict[str, str] = {
    SORT_FEATURED: "Featured",
    SORT_PRICE_LOW: "Price: Low to High",
    SORT_PRICE_HIGH: "Price: High to Low",
    SORT_NEWEST: "Newest",
}


# =============================================================================
# Pagination
# =============================================================================

DEFAULT_PAGE_SIZE = 9
PAGE_SIZE_OPTIONS: List[int] = [9, 18, 36]
ELLIPSIS = "..."


def get_sort_label(sort_by: str) -> str:
    """Get display label for a sort key."""
    return SORT_OPTIONS.get(sort_by, sort_by)
