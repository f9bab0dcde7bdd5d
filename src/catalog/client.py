"""HTTP client for the UrbanFood catalog REST API.

This is the fetch collaborator for browsing sessions: it downloads the
category list and the product listing, and converts the JSON payloads into
Category / Product records. Filtering happens client-side afterwards.
"""

from typing import Any, Dict, List, Optional

import requests
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from config import config
from config.logging_config import get_logger
from src.catalog.state import Category, Product

logger = get_logger("catalog.client")


class CatalogFetchError(Exception):
    """Raised when the catalog API cannot be read."""


class CatalogClient:
    """Client for the categories and products endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the catalog client.

        Args:
            base_url: API root, e.g. ``http://localhost:8000``.
            timeout: Request timeout in seconds.
            session: Optional pre-configured requests session.
        """
        self.base_url = (base_url or config.catalog.base_url).rstrip("/")
        self.timeout = timeout or config.catalog.request_timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    @retry(
        retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    def _send(self, path: str, params: Optional[Dict[str, Any]]) -> requests.Response:
        return self.session.get(
            f"{self.base_url}{path}",
            params=params,
            timeout=self.timeout,
        )

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET a JSON document.

        Connection errors and timeouts are retried; anything else fails fast.

        Raises:
            CatalogFetchError: On transport failure, error status or bad JSON.
        """
        logger.debug(f"GET {path} params={params}")
        try:
            response = self._send(path, params)
        except requests.RequestException as e:
            raise CatalogFetchError(f"Could not reach {self.base_url}{path}: {e}") from e

        if response.status_code >= 400:
            raise CatalogFetchError(
                f"GET {path} failed with HTTP {response.status_code}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise CatalogFetchError(f"GET {path} returned invalid JSON") from e

    def fetch_categories(self) -> List[Category]:
        """Fetch all categories."""
        data = self._get("/api/categories")
        categories = []
        for record in data:
            try:
                categories.append(Category.from_dict(record))
            except ValueError as e:
                logger.warning(f"Skipping category: {e}")
        return categories

    def fetch_category(self, category_id: int) -> Category:
        """Fetch a single category by id."""
        return Category.from_dict(self._get(f"/api/categories/{category_id}"))

    def fetch_products(
        self,
        category_id: Optional[int] = None,
        vendor_id: Optional[int] = None,
        featured: bool = False,
    ) -> List[Product]:
        """
        Fetch the product listing.

        Args:
            category_id: Restrict to one category (server-side).
            vendor_id: Restrict to one vendor (server-side).
            featured: Only featured products.

        Returns:
            Products in server order; malformed records are skipped.
        """
        params: Dict[str, Any] = {}
        if category_id is not None:
            params["categoryId"] = category_id
        if vendor_id is not None:
            params["vendorId"] = vendor_id
        if featured:
            params["featured"] = "true"

        data = self._get("/api/products", params or None)

        products = []
        skipped = 0
        for record in data:
            try:
                products.append(Product.from_dict(record))
            except ValueError as e:
                skipped += 1
                logger.warning(f"Skipping product: {e}")

        logger.info(f"Fetched {len(products)} products ({skipped} skipped)")
        return products

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
