"""API Pydantic models."""

from api.models.schemas import (
    SortOption,
    CategoryItem,
    ProductItem,
    FilterStateModel,
    FilterChangeModel,
    ApplyFilterRequest,
    FilterStateResponse,
    PaginationInfo,
    CatalogSearchResponse,
    CatalogOptionsResponse,
)

__all__ = [
    "SortOption",
    "CategoryItem",
    "ProductItem",
    "FilterStateModel",
    "FilterChangeModel",
    "ApplyFilterRequest",
    "FilterStateResponse",
    "PaginationInfo",
    "CatalogSearchResponse",
    "CatalogOptionsResponse",
]
