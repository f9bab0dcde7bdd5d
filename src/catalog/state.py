"""Filter state and catalog records for UrbanFood.

FilterState is immutable: every filter change produces a new instance
(see reducer.py), so a state handed to the query executor can never change
underneath it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, FrozenSet, Optional, Tuple

from config.constants import (
    DEFAULT_PRICE_RANGE,
    MAX_RATING,
    MIN_RATING,
    PRICE_CEILING,
    PRICE_FLOOR,
    SORT_FEATURED,
    SORT_OPTIONS,
)


def clamp_price(value: float) -> float:
    """Clamp a single price bound into the global price bounds."""
    return max(PRICE_FLOOR, min(PRICE_CEILING, value))


def clamp_rating(level: int) -> int:
    """Clamp a rating level into 0-5."""
    return max(MIN_RATING, min(MAX_RATING, int(level)))


@dataclass(frozen=True)
class FilterState:
    """Current catalog filter selections."""

    category_ids: FrozenSet[int] = frozenset()
    price_range: Tuple[float, float] = DEFAULT_PRICE_RANGE
    locations: FrozenSet[str] = frozenset()
    organic_only: bool = False
    local_only: bool = False
    fresh_picked_only: bool = False
    rating: int = 0
    sort_by: str = SORT_FEATURED
    search: str = ""

    def __post_init__(self):
        # Accept any iterable for the set fields and normalise them
        object.__setattr__(self, "category_ids", frozenset(int(c) for c in self.category_ids))
        object.__setattr__(self, "locations", frozenset(self.locations))
        object.__setattr__(
            self, "price_range", (float(self.price_range[0]), float(self.price_range[1]))
        )
        if self.sort_by not in SORT_OPTIONS:
            raise ValueError(f"Unknown sort option: {self.sort_by}")
        object.__setattr__(self, "search", (self.search or "").strip())

    @property
    def price_min(self) -> float:
        return self.price_range[0]

    @property
    def price_max(self) -> float:
        return self.price_range[1]

    @property
    def has_inverted_price_range(self) -> bool:
        """True while the two price bounds are crossed."""
        return self.price_range[0] > self.price_range[1]

    @property
    def is_default_price_range(self) -> bool:
        return self.price_range == DEFAULT_PRICE_RANGE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "category_ids": sorted(self.category_ids),
            "price_range": [self.price_range[0], self.price_range[1]],
            "locations": sorted(self.locations),
            "organic_only": self.organic_only,
            "local_only": self.local_only,
            "fresh_picked_only": self.fresh_picked_only,
            "rating": self.rating,
            "sort_by": self.sort_by,
            "search": self.search,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FilterState":
        """Create from dictionary."""
        price_range = data.get("price_range") or DEFAULT_PRICE_RANGE
        return cls(
            category_ids=frozenset(data.get("category_ids", [])),
            price_range=(price_range[0], price_range[1]),
            locations=frozenset(data.get("locations", [])),
            organic_only=bool(data.get("organic_only", False)),
            local_only=bool(data.get("local_only", False)),
            fresh_picked_only=bool(data.get("fresh_picked_only", False)),
            rating=clamp_rating(data.get("rating", 0)),
            sort_by=data.get("sort_by", SORT_FEATURED),
            search=data.get("search") or "",
        )

    def get_summary(self) -> str:
        """Get a human-readable summary of active filters."""
        parts = []

        if self.category_ids:
            parts.append(f"Categories: {', '.join(str(c) for c in sorted(self.category_ids))}")
        if not self.is_default_price_range:
            parts.append(f"Price: {self.price_min:g} to {self.price_max:g}")
        if self.locations:
            if len(self.locations) <= 2:
                parts.append(f"Locations: {', '.join(sorted(self.locations))}")
            else:
                parts.append(f"Locations: {len(self.locations)} selected")

        flags = [
            label
            for label, enabled in (
                ("organic", self.organic_only),
                ("local", self.local_only),
                ("fresh picked", self.fresh_picked_only),
            )
            if enabled
        ]
        if flags:
            parts.append(f"Only: {', '.join(flags)}")
        if self.rating > 0:
            parts.append(f"Rating: {self.rating}+")
        if self.search:
            parts.append(f"Search: \"{self.search}\"")

        return " | ".join(parts) if parts else "All products (no filters)"


def _pick(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present key, so camelCase and snake_case payloads both work."""
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return default


def _flag(value: Any) -> bool:
    """Only a real True or the string "true" (any case) sets a flag."""
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return value is True


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


@dataclass
class Category:
    """Product category reference record."""

    id: int
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Category":
        try:
            return cls(
                id=int(data["id"]),
                name=str(data["name"]),
                description=data.get("description"),
                image_url=_pick(data, "imageUrl", "image_url"),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed category record: {data!r}") from e


@dataclass
class Product:
    """A catalog product as served by the product-listing collaborator."""

    id: int
    name: str
    price: float
    category_id: Optional[int] = None
    location: Optional[str] = None
    is_organic: bool = False
    is_local: bool = False
    is_fresh_picked: bool = False
    rating: float = 0.0
    description: Optional[str] = None
    vendor_id: Optional[int] = None
    image_url: Optional[str] = None
    unit: Optional[str] = None
    inventory: int = 0
    featured: bool = False
    created_at: Optional[datetime] = field(default=None, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        """
        Build a product from a REST payload.

        Accepts camelCase (``categoryId``, ``isOrganic``) or snake_case keys.
        Missing flags are treated as False and a missing rating as 0.

        Raises:
            ValueError: If id, name or price is missing or not numeric.
        """
        try:
            product_id = int(data["id"])
            name = str(data["name"])
            price = float(data["price"])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Malformed product record: {data!r}") from e

        category_id = _pick(data, "categoryId", "category_id")
        vendor_id = _pick(data, "vendorId", "vendor_id", "farmerId")

        return cls(
            id=product_id,
            name=name,
            price=price,
            category_id=int(category_id) if category_id is not None else None,
            location=_pick(data, "location", "vendorLocation", "vendor_location"),
            is_organic=_flag(_pick(data, "isOrganic", "is_organic", "organic", default=False)),
            is_local=_flag(_pick(data, "isLocal", "is_local", default=False)),
            is_fresh_picked=_flag(_pick(data, "isFreshPicked", "is_fresh_picked", default=False)),
            rating=float(_pick(data, "rating", default=0.0)),
            description=data.get("description"),
            vendor_id=int(vendor_id) if vendor_id is not None else None,
            image_url=_pick(data, "imageUrl", "image_url"),
            unit=data.get("unit"),
            inventory=int(_pick(data, "inventory", "stock", default=0)),
            featured=_flag(data.get("featured", False)),
            created_at=_parse_timestamp(_pick(data, "createdAt", "created_at")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase payload, the shape the storefront client reads."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "categoryId": self.category_id,
            "location": self.location,
            "isOrganic": self.is_organic,
            "isLocal": self.is_local,
            "isFreshPicked": self.is_fresh_picked,
            "rating": self.rating,
            "description": self.description,
            "vendorId": self.vendor_id,
            "imageUrl": self.image_url,
            "unit": self.unit,
            "inventory": self.inventory,
            "featured": self.featured,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
