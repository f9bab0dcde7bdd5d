"""Tests for the active-filter counter."""

from src.catalog import (
    ClearAll,
    FilterState,
    SetPriceMax,
    SetPriceMin,
    SetSearch,
    SetSort,
    ToggleCategory,
    ToggleLocation,
    apply,
    apply_all,
    count_active_filters,
)
from src.catalog.counter import MAX_ACTIVE_FILTERS


class TestCountActiveFilters:
    """Tests for count_active_filters."""

    def test_default_state(self):
        assert count_active_filters(FilterState()) == 0

    def test_groups_count_once(self):
        state = apply_all(
            FilterState(),
            ToggleCategory(1),
            ToggleCategory(2),
            ToggleCategory(3),
            ToggleLocation("Kandy"),
            ToggleLocation("Colombo"),
        )
        assert count_active_filters(state) == 2

    def test_price_counts_when_moved(self):
        assert count_active_filters(apply(FilterState(), SetPriceMin(100))) == 1
        assert count_active_filters(apply(FilterState(), SetPriceMax(4999))) == 1

    def test_price_moved_back_to_default(self):
        state = apply_all(FilterState(), SetPriceMin(100), SetPriceMin(0))
        assert count_active_filters(state) == 0

    def test_sort_does_not_count(self):
        assert count_active_filters(apply(FilterState(), SetSort("newest"))) == 0

    def test_search_does_not_count(self):
        assert count_active_filters(apply(FilterState(), SetSearch("mango"))) == 0

    def test_everything_active(self):
        state = FilterState(
            category_ids={1},
            price_range=(10, 20),
            locations={"Jaffna"},
            organic_only=True,
            local_only=True,
            fresh_picked_only=True,
            rating=5,
            sort_by="newest",
            search="curd",
        )
        assert count_active_filters(state) == MAX_ACTIVE_FILTERS == 7

    def test_clear_all_counts_zero(self):
        state = FilterState(category_ids={1}, organic_only=True, rating=2)
        assert count_active_filters(apply(state, ClearAll())) == 0
