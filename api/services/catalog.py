"""Catalog service: reads the store database and runs catalog searches."""

from functools import lru_cache
from typing import Optional

from api.config import get_settings
from api.services.cache import TTLCache
from api.services.database import DatabaseService, get_db
from config.logging_config import get_logger
from src.catalog import (
    Category,
    FilterState,
    Product,
    compute_page_slice,
    count_active_filters,
    describe_page,
    distinct_locations,
    matches_search,
    query_catalog,
)

logger = get_logger("api.catalog")

PRODUCT_COLUMNS = """
    id, name, description, price, inventory, image_url, vendor_id, category_id,
    unit, is_organic, is_local, is_fresh_picked, featured, created_at,
    location, rating
"""


class CatalogService:
    """Service for category, product and catalog search queries."""

    def __init__(self, db: DatabaseService, cache: Optional[TTLCache] = None):
        self.db = db
        self.cache = cache or TTLCache(maxsize=16, ttl=get_settings().cache_ttl_seconds)

    # -- categories ---------------------------------------------------------

    def list_categories(self) -> list[Category]:
        """Get all categories ordered by id."""
        rows = self.db.fetch_dicts(
            "SELECT id, name, description, image_url FROM categories ORDER BY id"
        )
        return [Category.from_dict(row) for row in rows]

    def get_category(self, category_id: int) -> Optional[Category]:
        rows = self.db.fetch_dicts(
            "SELECT id, name, description, image_url FROM categories WHERE id = ?",
            [category_id],
        )
        return Category.from_dict(rows[0]) if rows else None

    # -- products -----------------------------------------------------------

    def _fetch_products(self, where: str = "1=1", params: Optional[list] = None) -> list[Product]:
        rows = self.db.fetch_dicts(
            f"SELECT {PRODUCT_COLUMNS} FROM product_listing WHERE {where} ORDER BY id",
            params,
        )
        return [Product.from_dict(row) for row in rows]

    def load_catalog(self) -> list[Product]:
        """Full product collection, cached for the service's TTL."""
        return self.cache.get_or_load("products:all", self._fetch_products)

    def list_products(
        self,
        category_id: Optional[int] = None,
        vendor_id: Optional[int] = None,
        featured: bool = False,
        search: Optional[str] = None,
    ) -> list[Product]:
        """
        Product listing with the storefront's server-side narrowing.

        Only one narrowing applies, in order of precedence: featured, then
        category, then vendor. A search text then narrows that listing by
        name or description, case-insensitively.
        """
        if featured:
            products = self._fetch_products("featured = true")
        elif category_id is not None:
            products = self._fetch_products("category_id = ?", [category_id])
        elif vendor_id is not None:
            products = self._fetch_products("vendor_id = ?", [vendor_id])
        else:
            products = self.load_catalog()

        if search:
            products = [p for p in products if matches_search(p, search)]
        return products

    def get_product(self, product_id: int) -> Optional[Product]:
        products = self._fetch_products("id = ?", [product_id])
        return products[0] if products else None

    def list_locations(self) -> list[str]:
        """Vendor locations offered as location filter options."""
        return distinct_locations(self.load_catalog())

    # -- search -------------------------------------------------------------

    def search(self, state: FilterState, page: int = 1, page_size: int = 9) -> dict:
        """
        Filter, sort and paginate the catalog.

        Args:
            state: Active filter state.
            page: 1-based page number; pages past the end return no products.
            page_size: Products per page.

        Returns:
            Dictionary with products, pagination, active_filter_count,
            filters and summary.
        """
        results = query_catalog(self.load_catalog(), state)
        descriptor = describe_page(len(results), page, page_size)

        logger.debug(
            f"Catalog search: {state.get_summary()} -> {len(results)} products, page {page}"
        )

        return {
            "products": [p.to_dict() for p in compute_page_slice(results, page, page_size)],
            "pagination": descriptor.to_dict(),
            "active_filter_count": count_active_filters(state),
            "filters": state.to_dict(),
            "summary": state.get_summary(),
        }

    def invalidate(self) -> int:
        """Drop cached listings."""
        return self.cache.invalidate("products:")


@lru_cache
def get_catalog_service() -> CatalogService:
    """Get the application's catalog service."""
    return CatalogService(get_db())
