"""Filter reducer: pure transitions of FilterState.

Each kind of filter change is its own frozen dataclass carrying exactly the
data it needs. ``apply`` dispatches on the change type and always returns a
new FilterState; the input state is never modified.
"""

from dataclasses import dataclass, replace
from functools import singledispatch
from typing import Union

from config.constants import SORT_OPTIONS
from config.logging_config import get_logger
from src.catalog.state import FilterState, clamp_price, clamp_rating

logger = get_logger("catalog.reducer")


@dataclass(frozen=True)
class ToggleCategory:
    category_id: int


@dataclass(frozen=True)
class SetPriceMin:
    value: float


@dataclass(frozen=True)
class SetPriceMax:
    value: float


@dataclass(frozen=True)
class ToggleLocation:
    label: str


@dataclass(frozen=True)
class SetOrganic:
    enabled: bool


@dataclass(frozen=True)
class SetLocal:
    enabled: bool


@dataclass(frozen=True)
class SetFreshPicked:
    enabled: bool


@dataclass(frozen=True)
class SetRating:
    level: int


@dataclass(frozen=True)
class SetSort:
    sort_by: str

    def __post_init__(self):
        if self.sort_by not in SORT_OPTIONS:
            raise ValueError(f"Unknown sort option: {self.sort_by}")


@dataclass(frozen=True)
class SetSearch:
    text: str


@dataclass(frozen=True)
class ClearAll:
    pass


FilterChange = Union[
    ToggleCategory,
    SetPriceMin,
    SetPriceMax,
    ToggleLocation,
    SetOrganic,
    SetLocal,
    SetFreshPicked,
    SetRating,
    SetSort,
    SetSearch,
    ClearAll,
]


@singledispatch
def _transition(change, state: FilterState) -> FilterState:
    raise TypeError(f"Unsupported filter change: {change!r}")


@_transition.register
def _(change: ToggleCategory, state: FilterState) -> FilterState:
    return replace(state, category_ids=state.category_ids ^ {int(change.category_id)})


@_transition.register
def _(change: SetPriceMin, state: FilterState) -> FilterState:
    # Only this bound moves; the max is left alone even if they cross
    return replace(state, price_range=(clamp_price(change.value), state.price_range[1]))


@_transition.register
def _(change: SetPriceMax, state: FilterState) -> FilterState:
    return replace(state, price_range=(state.price_range[0], clamp_price(change.value)))


@_transition.register
def _(change: ToggleLocation, state: FilterState) -> FilterState:
    return replace(state, locations=state.locations ^ {change.label})


@_transition.register
def _(change: SetOrganic, state: FilterState) -> FilterState:
    return replace(state, organic_only=bool(change.enabled))


@_transition.register
def _(change: SetLocal, state: FilterState) -> FilterState:
    return replace(state, local_only=bool(change.enabled))


@_transition.register
def _(change: SetFreshPicked, state: FilterState) -> FilterState:
    return replace(state, fresh_picked_only=bool(change.enabled))


@_transition.register
def _(change: SetRating, state: FilterState) -> FilterState:
    return replace(state, rating=clamp_rating(change.level))


@_transition.register
def _(change: SetSort, state: FilterState) -> FilterState:
    return replace(state, sort_by=change.sort_by)


@_transition.register
def _(change: SetSearch, state: FilterState) -> FilterState:
    return replace(state, search=change.text or "")


@_transition.register
def _(change: ClearAll, state: FilterState) -> FilterState:
    return FilterState()


def apply(state: FilterState, change: FilterChange) -> FilterState:
    """
    Apply a filter change to a state.

    Args:
        state: Current filter state.
        change: One of the FilterChange dataclasses.

    Returns:
        A new FilterState.

    Raises:
        TypeError: If ``change`` is not a known filter change.
    """
    new_state = _transition(change, state)
    if new_state.has_inverted_price_range:
        logger.debug(f"Price range is inverted after {change!r}: {new_state.price_range}")
    return new_state


def apply_all(state: FilterState, *changes: FilterChange) -> FilterState:
    """Apply a sequence of changes in order."""
    for change in changes:
        state = apply(state, change)
    return state
