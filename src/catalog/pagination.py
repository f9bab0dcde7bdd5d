"""Pagination windowing for the product grid.

Computes the page-number strip (with ellipsis markers) and slices the
filtered catalog for one page. Nothing here raises on an out-of-range page:
the slice is simply empty.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, TypeVar, Union

from config.constants import DEFAULT_PAGE_SIZE, ELLIPSIS

T = TypeVar("T")

PageNumber = Union[int, str]


def compute_page_numbers(current_page: int, total_pages: int) -> List[PageNumber]:
    """
    Compute the page-number strip for pagination controls.

    Always shows the first page, the pages adjacent to ``current_page`` and
    the last page, with ``ELLIPSIS`` standing in for skipped runs.

    Examples:
        >>> compute_page_numbers(1, 10)
        [1, 2, '...', 10]
        >>> compute_page_numbers(5, 10)
        [1, '...', 4, 5, 6, '...', 10]
    """
    pages: List[PageNumber] = [1]

    if current_page > 3:
        pages.append(ELLIPSIS)

    start_page = max(2, current_page - 1)
    end_page = min(total_pages - 1, current_page + 1)
    for i in range(start_page, end_page + 1):
        if 1 < i < total_pages:
            pages.append(i)

    if current_page < total_pages - 2:
        pages.append(ELLIPSIS)

    if total_pages > 1:
        pages.append(total_pages)

    return pages


def compute_page_slice(items: Sequence[T], current_page: int, page_size: int) -> List[T]:
    """
    Return the items shown on ``current_page``.

    Args:
        items: Full (filtered) item sequence.
        current_page: 1-based page number.
        page_size: Items per page.

    Returns:
        Up to ``page_size`` items; empty for pages outside the sequence.
    """
    if current_page < 1 or page_size < 1:
        return []
    offset = (current_page - 1) * page_size
    return list(items[offset:offset + page_size])


def count_pages(total_items: int, page_size: int) -> int:
    """Total number of pages, never less than 1."""
    if total_items <= 0 or page_size < 1:
        return 1
    return (total_items + page_size - 1) // page_size


@dataclass
class PageDescriptor:
    """Pagination state for one rendering of the product grid."""

    current_page: int = 1
    total_pages: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total_items: int = 0
    page_numbers: List[PageNumber] = field(default_factory=lambda: [1])

    @property
    def has_previous(self) -> bool:
        """The "previous" control is disabled on the first page."""
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        """The "next" control is disabled on the last page."""
        return self.current_page < self.total_pages

    @property
    def offset(self) -> int:
        return max(0, (self.current_page - 1) * self.page_size)

    @property
    def start_row(self) -> int:
        """1-based first row number for display."""
        if self.total_items == 0 or self.offset >= self.total_items:
            return 0
        return self.offset + 1

    @property
    def end_row(self) -> int:
        """1-based last row number for display."""
        if self.start_row == 0:
            return 0
        return min(self.offset + self.page_size, self.total_items)

    def get_display_range(self) -> str:
        """Get formatted display range string."""
        if self.start_row == 0:
            return "No products"
        return f"Showing {self.start_row:,} - {self.end_row:,} of {self.total_items:,}"

    def to_dict(self) -> dict:
        return {
            "page": self.current_page,
            "page_size": self.page_size,
            "total": self.total_items,
            "total_pages": self.total_pages,
            "page_numbers": list(self.page_numbers),
            "has_previous": self.has_previous,
            "has_next": self.has_next,
        }


def describe_page(total_items: int, current_page: int, page_size: int = DEFAULT_PAGE_SIZE) -> PageDescriptor:
    """Build the PageDescriptor for a result count and requested page."""
    total_pages = count_pages(total_items, page_size)
    return PageDescriptor(
        current_page=current_page,
        total_pages=total_pages,
        page_size=page_size,
        total_items=total_items,
        page_numbers=compute_page_numbers(current_page, total_pages),
    )
