"""Catalog query executor.

Narrows the full product collection with the active FilterState and orders
the result by the selected sort key. Filtering never reorders: the output is
always a subsequence of the input in its original order.
"""

from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from config.constants import (
    SORT_FEATURED,
    SORT_NEWEST,
    SORT_OPTIONS,
    SORT_PRICE_HIGH,
    SORT_PRICE_LOW,
)
from src.catalog.state import FilterState, Product


def matches_search(product: Product, text: str) -> bool:
    """Case-insensitive substring match on name or description."""
    needle = text.strip().lower()
    if not needle:
        return True
    return needle in product.name.lower() or needle in (product.description or "").lower()


def matches(product: Product, state: FilterState) -> bool:
    """Check whether a single product passes every active predicate."""
    if state.category_ids and product.category_id not in state.category_ids:
        return False
    if not (state.price_range[0] <= product.price <= state.price_range[1]):
        # Also rejects everything while the range is inverted
        return False
    if state.locations and product.location not in state.locations:
        return False
    if state.organic_only and not product.is_organic:
        return False
    if state.local_only and not product.is_local:
        return False
    if state.fresh_picked_only and not product.is_fresh_picked:
        return False
    if state.rating > 0 and (product.rating or 0) < state.rating:
        return False
    if state.search and not matches_search(product, state.search):
        return False
    return True


def filter_products(products: Iterable[Product], state: FilterState) -> List[Product]:
    """
    Filter products by the given state.

    Args:
        products: Full product collection.
        state: Active filter state.

    Returns:
        Matching products, in input order.
    """
    return [product for product in products if matches(product, state)]


def _created_key(product: Product) -> float:
    created: Optional[datetime] = product.created_at
    return created.timestamp() if created else float("-inf")


def sort_products(products: Sequence[Product], sort_by: str = SORT_FEATURED) -> List[Product]:
    """
    Order products by a sort key.

    ``featured`` keeps the server-supplied order. ``newest`` puts undated
    products last. All sorts are stable.

    Raises:
        ValueError: If ``sort_by`` is not a known sort option.
    """
    if sort_by not in SORT_OPTIONS:
        raise ValueError(f"Unknown sort option: {sort_by}")

    if sort_by == SORT_PRICE_LOW:
        return sorted(products, key=lambda p: p.price)
    if sort_by == SORT_PRICE_HIGH:
        return sorted(products, key=lambda p: p.price, reverse=True)
    if sort_by == SORT_NEWEST:
        return sorted(products, key=_created_key, reverse=True)
    return list(products)


def query_catalog(products: Iterable[Product], state: FilterState) -> List[Product]:
    """Filter then sort, as the product grid shows them."""
    return sort_products(filter_products(products, state), state.sort_by)


def distinct_locations(products: Iterable[Product]) -> List[str]:
    """Distinct non-empty vendor locations in first-seen order."""
    seen = {}
    for product in products:
        if product.location:
            seen.setdefault(product.location, None)
    return list(seen)
