"""Configuration module for UrbanFood.

All filter defaults are "everything" - no category or location is preselected.
"""

from .settings import config, DatabaseConfig, CatalogConfig, AppConfig, Config
from .constants import (
    PRICE_FLOOR,
    PRICE_CEILING,
    DEFAULT_PRICE_RANGE,
    MIN_RATING,
    MAX_RATING,
    SORT_FEATURED,
    SORT_PRICE_LOW,
    SORT_PRICE_HIGH,
    SORT_NEWEST,
    SORT_OPTIONS,
    DEFAULT_PAGE_SIZE,
    PAGE_SIZE_OPTIONS,
    ELLIPSIS,
    get_sort_label,
)

__all__ = [
    # Settings
    "config",
    "DatabaseConfig",
    "CatalogConfig",
    "AppConfig",
    "Config",
    # Price / rating bounds
    "PRICE_FLOOR",
    "PRICE_CEILING",
    "DEFAULT_PRICE_RANGE",
    "MIN_RATING",
    "MAX_RATING",
    # Sorting
    "SORT_FEATURED",
    "SORT_PRICE_LOW",
    "SORT_PRICE_HIGH",
    "SORT_NEWEST",
    "SORT_OPTIONS",
    "get_sort_label",
    # Pagination
    "DEFAULT_PAGE_SIZE",
    "PAGE_SIZE_OPTIONS",
    "ELLIPSIS",
]
