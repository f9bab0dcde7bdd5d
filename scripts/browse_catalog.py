#!/usr/bin/env python
"""
Browse the UrbanFood catalog from the command line.

Fetches the product listing from a running API, applies the requested
filters client-side and prints one page of the product grid.

Usage:
    python scripts/browse_catalog.py --organic --category 1 --sort price-low
    python scripts/browse_catalog.py --location Kandy --min-price 100 --page 2
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config, SORT_OPTIONS, get_sort_label
from config.logging_config import setup_logging, get_logger
from src.catalog import (
    CatalogClient,
    CatalogFetchError,
    CatalogSession,
    SetFreshPicked,
    SetLocal,
    SetOrganic,
    SetPriceMax,
    SetPriceMin,
    SetRating,
    SetSearch,
    SetSort,
    ToggleCategory,
    ToggleLocation,
)


def positive_int(value: str) -> int:
    """argparse type for page numbers and page sizes."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_changes(args) -> list:
    """Translate command-line flags into filter change events."""
    changes = []
    for category_id in args.category:
        changes.append(ToggleCategory(category_id))
    for location in args.location:
        changes.append(ToggleLocation(location))
    if args.min_price is not None:
        changes.append(SetPriceMin(args.min_price))
    if args.max_price is not None:
        changes.append(SetPriceMax(args.max_price))
    if args.organic:
        changes.append(SetOrganic(True))
    if args.local:
        changes.append(SetLocal(True))
    if args.fresh:
        changes.append(SetFreshPicked(True))
    if args.rating:
        changes.append(SetRating(args.rating))
    if args.search:
        changes.append(SetSearch(args.search))
    changes.append(SetSort(args.sort))
    return changes


def print_page(session: CatalogSession) -> None:
    page = session.page
    print(f"Filters: {session.state.get_summary()} ({session.active_filter_count} active)")
    print(f"Sorted by: {get_sort_label(session.state.sort_by)}")
    print(page.get_display_range())
    print("-" * 60)
    for product in session.page_items:
        flags = "".join(
            mark
            for mark, enabled in (
                ("O", product.is_organic),
                ("L", product.is_local),
                ("F", product.is_fresh_picked),
            )
            if enabled
        )
        print(
            f"{product.id:>4}  {product.name:<24} {product.price:>9,.2f}  "
            f"{product.rating:>3.1f}  {flags:<3} {product.location or ''}"
        )
    print("-" * 60)
    strip = " ".join(
        f"[{n}]" if n == page.current_page else str(n) for n in page.page_numbers
    )
    print(f"Pages: {strip}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse the UrbanFood product catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--api-url", default=config.catalog.base_url, help="Catalog API root")
    parser.add_argument("--category", type=int, action="append", default=[], help="Category id (repeatable)")
    parser.add_argument("--location", action="append", default=[], help="Vendor location (repeatable)")
    parser.add_argument("--min-price", type=float, help="Minimum price")
    parser.add_argument("--max-price", type=float, help="Maximum price")
    parser.add_argument("--organic", action="store_true", help="Organic products only")
    parser.add_argument("--local", action="store_true", help="Local products only")
    parser.add_argument("--fresh", action="store_true", help="Fresh-picked products only")
    parser.add_argument("--rating", type=int, choices=range(0, 6), default=0, help="Minimum rating")
    parser.add_argument("--search", help="Text in product name or description")
    parser.add_argument("--sort", choices=list(SORT_OPTIONS), default="featured", help="Sort order")
    parser.add_argument("--page", type=positive_int, default=1, help="Page number")
    parser.add_argument("--page-size", type=positive_int, default=config.catalog.page_size, help="Products per page")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level",
    )
    return parser


def main():
    """Main entry point for the catalog browser."""
    args = build_parser().parse_args()

    setup_logging(log_level=args.log_level)
    logger = get_logger("browse_catalog")

    try:
        with CatalogClient(base_url=args.api_url) as client:
            products = client.fetch_products()
    except CatalogFetchError as e:
        logger.error(f"Could not load catalog: {e}")
        return 1

    with CatalogSession(products, page_size=args.page_size) as session:
        for change in build_changes(args):
            session.dispatch(change)
        session.on_page_change(args.page)
        print_page(session)

    return 0


if __name__ == "__main__":
    sys.exit(main())
