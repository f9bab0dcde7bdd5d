"""Catalog filtering, sorting and pagination for UrbanFood."""

from .state import FilterState, Product, Category, clamp_price, clamp_rating
from .reducer import (
    FilterChange,
    ToggleCategory,
    SetPriceMin,
    SetPriceMax,
    ToggleLocation,
    SetOrganic,
    SetLocal,
    SetFreshPicked,
    SetRating,
    SetSort,
    SetSearch,
    ClearAll,
    apply,
    apply_all,
)
from .counter import count_active_filters
from .query import (
    filter_products,
    matches_search,
    sort_products,
    query_catalog,
    distinct_locations,
)
from .pagination import (
    PageDescriptor,
    compute_page_numbers,
    compute_page_slice,
    count_pages,
    describe_page,
)
from .session import CatalogSession
from .client import CatalogClient, CatalogFetchError

__all__ = [
    # State
    "FilterState",
    "Product",
    "Category",
    "clamp_price",
    "clamp_rating",
    # Reducer
    "FilterChange",
    "ToggleCategory",
    "SetPriceMin",
    "SetPriceMax",
    "ToggleLocation",
    "SetOrganic",
    "SetLocal",
    "SetFreshPicked",
    "SetRating",
    "SetSort",
    "SetSearch",
    "ClearAll",
    "apply",
    "apply_all",
    # Counter
    "count_active_filters",
    # Query
    "filter_products",
    "matches_search",
    "sort_products",
    "query_catalog",
    "distinct_locations",
    # Pagination
    "PageDescriptor",
    "compute_page_numbers",
    "compute_page_slice",
    "count_pages",
    "describe_page",
    # Session / client
    "CatalogSession",
    "CatalogClient",
    "CatalogFetchError",
]
