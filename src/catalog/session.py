"""Catalog browsing session.

A CatalogSession is the per-view context object: it is created when a product
listing view mounts, owns the fetched catalog, the current FilterState and the
current page, and is closed when the view goes away. Derived results are
recomputed from those three inputs whenever one of them changes.
"""

from typing import Callable, Iterable, List, Optional

from config.constants import DEFAULT_PAGE_SIZE
from config.logging_config import get_logger
from src.catalog.counter import count_active_filters
from src.catalog.pagination import PageDescriptor, compute_page_slice, describe_page
from src.catalog.query import distinct_locations, query_catalog
from src.catalog.reducer import FilterChange, apply
from src.catalog.state import FilterState, Product

logger = get_logger("catalog.session")

Listener = Callable[["CatalogSession"], None]


class CatalogSession:
    """
    Holds one view's catalog, filters and page.

    Usage:
        with CatalogSession(products, page_size=9) as session:
            session.dispatch(SetOrganic(True))
            session.on_page_change(2)
            items = session.page_items
    """

    def __init__(
        self,
        products: Iterable[Product] = (),
        page_size: int = DEFAULT_PAGE_SIZE,
        state: Optional[FilterState] = None,
        on_change: Optional[Listener] = None,
    ):
        """
        Initialize a browsing session.

        Args:
            products: Catalog fetched from the product-listing collaborator.
            page_size: Products per page.
            state: Initial filter state (defaults to no filtering).
            on_change: Optional listener called after every change.
        """
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")

        self.page_size = page_size
        self._products: List[Product] = list(products)
        self._state = state or FilterState()
        self._current_page = 1
        self._listeners: List[Listener] = []
        self._results: Optional[List[Product]] = None
        self._closed = False

        if on_change is not None:
            self.subscribe(on_change)

    # -- inputs -------------------------------------------------------------

    @property
    def products(self) -> List[Product]:
        return list(self._products)

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def current_page(self) -> int:
        return self._current_page

    def load(self, products: Iterable[Product]) -> None:
        """Replace the catalog after a completed fetch."""
        self._ensure_open()
        self._products = list(products)
        self._results = None
        logger.debug(f"Loaded {len(self._products)} products")
        self._notify()

    def dispatch(self, change: FilterChange) -> FilterState:
        """Run a filter change through the reducer and install the result."""
        new_state = apply(self._state, change)
        self.on_filter_change(new_state)
        return new_state

    def on_filter_change(self, new_state: FilterState) -> None:
        """Install a new filter state; the grid jumps back to page 1."""
        self._ensure_open()
        self._state = new_state
        self._current_page = 1
        self._results = None
        logger.debug(f"Filters changed: {new_state.get_summary()}")
        self._notify()

    def on_page_change(self, page: int) -> None:
        """
        Move to ``page``.

        Pages outside ``[1, total_pages]`` are accepted and render as an empty
        slice rather than raising.
        """
        self._ensure_open()
        self._current_page = int(page)
        self._notify()

    def next_page(self) -> None:
        if self.page.has_next:
            self.on_page_change(self._current_page + 1)

    def previous_page(self) -> None:
        if self.page.has_previous:
            self.on_page_change(self._current_page - 1)

    # -- derived ------------------------------------------------------------

    @property
    def results(self) -> List[Product]:
        """Filtered and sorted catalog."""
        if self._results is None:
            self._results = query_catalog(self._products, self._state)
        return self._results

    @property
    def page(self) -> PageDescriptor:
        return describe_page(len(self.results), self._current_page, self.page_size)

    @property
    def page_items(self) -> List[Product]:
        return compute_page_slice(self.results, self._current_page, self.page_size)

    @property
    def active_filter_count(self) -> int:
        return count_active_filters(self._state)

    @property
    def locations(self) -> List[str]:
        """Location filter options, taken from the whole catalog."""
        return distinct_locations(self._products)

    # -- listeners / lifecycle ---------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with the session after each change.

        Returns:
            A callable that removes the listener.
        """
        self._ensure_open()
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("CatalogSession is closed")

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Tear down the session: drop listeners and the catalog."""
        self._listeners.clear()
        self._products = []
        self._results = None
        self._closed = True

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False
