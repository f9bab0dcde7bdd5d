"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, Field
from typing import Annotated, Literal, Optional, Union
from enum import Enum

from config.constants import DEFAULT_PRICE_RANGE, MAX_RATING, PRICE_CEILING, PRICE_FLOOR
from src.catalog import (
    ClearAll,
    FilterState,
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


class SortOption(str, Enum):
    """Catalog sort keys."""
    FEATURED = "featured"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    NEWEST = "newest"


class CategoryItem(BaseModel):
    """Category reference item."""
    id: int
    name: str
    description: Optional[str] = None
    imageUrl: Optional[str] = None


class ProductItem(BaseModel):
    """Product as served to the storefront."""
    id: int
    name: str
    price: float
    categoryId: Optional[int] = None
    location: Optional[str] = None
    isOrganic: bool = False
    isLocal: bool = False
    isFreshPicked: bool = False
    rating: float = 0
    description: Optional[str] = None
    vendorId: Optional[int] = None
    imageUrl: Optional[str] = None
    unit: Optional[str] = None
    inventory: int = 0
    featured: bool = False
    createdAt: Optional[str] = None


class FilterStateModel(BaseModel):
    """Filter state as exchanged with the storefront."""
    category_ids: list[int] = Field(default_factory=list, description="Selected category ids")
    price_range: tuple[float, float] = Field(DEFAULT_PRICE_RANGE, description="Inclusive [min, max]")
    locations: list[str] = Field(default_factory=list, description="Selected vendor locations")
    organic_only: bool = False
    local_only: bool = False
    fresh_picked_only: bool = False
    rating: int = Field(0, ge=0, le=MAX_RATING, description="Minimum rating, 0 for any")
    sort_by: SortOption = SortOption.FEATURED
    search: str = Field("", description="Text matched against product name and description")

    def to_state(self) -> FilterState:
        return FilterState(
            category_ids=frozenset(self.category_ids),
            price_range=self.price_range,
            locations=frozenset(self.locations),
            organic_only=self.organic_only,
            local_only=self.local_only,
            fresh_picked_only=self.fresh_picked_only,
            rating=self.rating,
            sort_by=self.sort_by.value,
            search=self.search,
        )

    @classmethod
    def from_state(cls, state: FilterState) -> "FilterStateModel":
        return cls(**state.to_dict())


# Filter change events, discriminated on "kind"

class ToggleCategoryChange(BaseModel):
    kind: Literal["toggle-category"]
    category_id: int

    def to_change(self):
        return ToggleCategory(self.category_id)


class SetPriceMinChange(BaseModel):
    kind: Literal["set-price-min"]
    value: float

    def to_change(self):
        return SetPriceMin(self.value)


class SetPriceMaxChange(BaseModel):
    kind: Literal["set-price-max"]
    value: float

    def to_change(self):
        return SetPriceMax(self.value)


class ToggleLocationChange(BaseModel):
    kind: Literal["toggle-location"]
    label: str

    def to_change(self):
        return ToggleLocation(self.label)


class SetOrganicChange(BaseModel):
    kind: Literal["set-organic"]
    enabled: bool

    def to_change(self):
        return SetOrganic(self.enabled)


class SetLocalChange(BaseModel):
    kind: Literal["set-local"]
    enabled: bool

    def to_change(self):
        return SetLocal(self.enabled)


class SetFreshPickedChange(BaseModel):
    kind: Literal["set-fresh-picked"]
    enabled: bool

    def to_change(self):
        return SetFreshPicked(self.enabled)


class SetRatingChange(BaseModel):
    kind: Literal["set-rating"]
    level: int = Field(..., ge=0, le=MAX_RATING)

    def to_change(self):
        return SetRating(self.level)


class SetSortChange(BaseModel):
    kind: Literal["set-sort"]
    sort_by: SortOption

    def to_change(self):
        return SetSort(self.sort_by.value)


class SetSearchChange(BaseModel):
    kind: Literal["set-search"]
    text: str = ""

    def to_change(self):
        return SetSearch(self.text)


class ClearAllChange(BaseModel):
    kind: Literal["clear-all"]

    def to_change(self):
        return ClearAll()


FilterChangeModel = Annotated[
    Union[
        ToggleCategoryChange,
        SetPriceMinChange,
        SetPriceMaxChange,
        ToggleLocationChange,
        SetOrganicChange,
        SetLocalChange,
        SetFreshPickedChange,
        SetRatingChange,
        SetSortChange,
        SetSearchChange,
        ClearAllChange,
    ],
    Field(discriminator="kind"),
]


class ApplyFilterRequest(BaseModel):
    """Request body for the filter reducer endpoint."""
    state: FilterStateModel = Field(default_factory=FilterStateModel)
    change: FilterChangeModel


class FilterStateResponse(BaseModel):
    """Reduced filter state with its badge count."""
    state: FilterStateModel
    active_filter_count: int
    summary: str


class PaginationInfo(BaseModel):
    """Pagination metadata."""
    page: int
    page_size: int
    total: int
    total_pages: int
    page_numbers: list[Union[int, str]]
    has_previous: bool
    has_next: bool


class CatalogSearchResponse(BaseModel):
    """Response for the catalog search endpoint."""
    products: list[ProductItem]
    pagination: PaginationInfo
    active_filter_count: int
    filters: FilterStateModel
    summary: str


class PriceBounds(BaseModel):
    """Global price slider bounds."""
    min: float = PRICE_FLOOR
    max: float = PRICE_CEILING


class SortOptionItem(BaseModel):
    """Sort selector entry."""
    value: SortOption
    label: str


class CatalogOptionsResponse(BaseModel):
    """Everything the filter panel needs to render its controls."""
    categories: list[CategoryItem]
    locations: list[str]
    price: PriceBounds = PriceBounds()
    sort_options: list[SortOptionItem]
    page_size_options: list[int]
