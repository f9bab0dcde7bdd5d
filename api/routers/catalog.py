"""Catalog search API router.

Filtering, sorting and pagination over the full product listing, plus the
filter reducer so thin clients can apply change events server-side.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from api.config import get_settings
from api.models.schemas import (
    ApplyFilterRequest,
    CatalogOptionsResponse,
    CatalogSearchResponse,
    CategoryItem,
    FilterStateModel,
    FilterStateResponse,
    SortOption,
    SortOptionItem,
)
from api.services.catalog import CatalogService, get_catalog_service
from config.constants import (
    MAX_RATING,
    PAGE_SIZE_OPTIONS,
    PRICE_CEILING,
    PRICE_FLOOR,
    SORT_OPTIONS,
)
from src.catalog import FilterState, apply, clamp_price, count_active_filters

router = APIRouter()


def _split_csv(value: Optional[str]) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def _parse_ids(value: Optional[str]) -> list[int]:
    try:
        return [int(part) for part in _split_csv(value)]
    except ValueError:
        raise HTTPException(
            status_code=422,
            detail=f"category_ids must be a comma-separated list of integers, got {value!r}",
        )


@router.get("", response_model=CatalogSearchResponse)
async def search_catalog(
    category_ids: Optional[str] = Query(None, description="Comma-separated category ids"),
    locations: Optional[str] = Query(None, description="Comma-separated vendor locations"),
    price_min: float = Query(PRICE_FLOOR, description="Minimum price (inclusive)"),
    price_max: float = Query(PRICE_CEILING, description="Maximum price (inclusive)"),
    organic_only: bool = Query(False),
    local_only: bool = Query(False),
    fresh_picked_only: bool = Query(False),
    rating: int = Query(0, ge=0, le=MAX_RATING, description="Minimum rating, 0 for any"),
    sort_by: SortOption = Query(SortOption.FEATURED),
    search: Optional[str] = Query(None, description="Text in product name or description"),
    page: int = Query(1, ge=1, description="Page number"),
    page_size: Optional[int] = Query(None, ge=1, description="Products per page"),
    service: CatalogService = Depends(get_catalog_service),
):
    """
    Filter, sort and paginate the product catalog.

    Pages past the last page return an empty product list with the usual
    pagination metadata.
    """
    settings = get_settings()
    size = min(page_size or settings.default_page_size, settings.max_page_size)

    state = FilterState(
        category_ids=frozenset(_parse_ids(category_ids)),
        price_range=(clamp_price(price_min), clamp_price(price_max)),
        locations=frozenset(_split_csv(locations)),
        organic_only=organic_only,
        local_only=local_only,
        fresh_picked_only=fresh_picked_only,
        rating=rating,
        sort_by=sort_by.value,
        search=search or "",
    )
    return service.search(state, page=page, page_size=size)


@router.get("/locations", response_model=list[str])
async def list_locations(service: CatalogService = Depends(get_catalog_service)):
    """Vendor locations present in the catalog, in first-seen order."""
    return service.list_locations()


@router.get("/options", response_model=CatalogOptionsResponse)
async def get_filter_options(service: CatalogService = Depends(get_catalog_service)):
    """Get the choices and bounds for every filter control."""
    categories = [
        CategoryItem(
            id=c.id,
            name=c.name,
            description=c.description,
            imageUrl=c.image_url,
        )
        for c in service.list_categories()
    ]
    return CatalogOptionsResponse(
        categories=categories,
        locations=service.list_locations(),
        sort_options=[
            SortOptionItem(value=SortOption(key), label=label)
            for key, label in SORT_OPTIONS.items()
        ],
        page_size_options=PAGE_SIZE_OPTIONS,
    )


@router.post("/filters", response_model=FilterStateResponse)
async def apply_filter_change(request: ApplyFilterRequest):
    """Apply one filter change event and return the next state."""
    state = apply(request.state.to_state(), request.change.to_change())
    return FilterStateResponse(
        state=FilterStateModel.from_state(state),
        active_filter_count=count_active_filters(state),
        summary=state.get_summary(),
    )
