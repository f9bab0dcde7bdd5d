"""Tests for filter state and catalog records."""

from datetime import datetime

import pytest

from src.catalog import Category, FilterState, Product, filter_products


class TestFilterState:
    """Tests for FilterState."""

    def test_defaults(self):
        state = FilterState()

        assert state.category_ids == frozenset()
        assert state.price_range == (0, 5000)
        assert state.locations == frozenset()
        assert state.rating == 0
        assert state.sort_by == "featured"
        assert state.is_default_price_range

    def test_is_immutable(self):
        state = FilterState()
        with pytest.raises(AttributeError):
            state.rating = 3

    def test_accepts_any_iterable(self):
        state = FilterState(category_ids=[2, 1, 2], locations=("Kandy",))

        assert state.category_ids == frozenset({1, 2})
        assert state.locations == frozenset({"Kandy"})

    def test_unknown_sort(self):
        with pytest.raises(ValueError):
            FilterState(sort_by="random")

    def test_dict_round_trip(self):
        state = FilterState(category_ids={3, 1}, price_range=(100, 900), rating=4, search="curd")
        data = state.to_dict()

        assert data["category_ids"] == [1, 3]
        assert data["search"] == "curd"
        assert FilterState.from_dict(data) == state

    def test_summary(self):
        assert FilterState().get_summary() == "All products (no filters)"

        summary = FilterState(organic_only=True, rating=4).get_summary()
        assert "organic" in summary
        assert "4+" in summary


class TestProductRecords:
    """Tests for Product and Category parsing."""

    def test_product_from_camel_case(self):
        product = Product.from_dict({
            "id": "7",
            "name": "Mangosteen",
            "price": "1500",
            "categoryId": 2,
            "location": "Kandy",
            "isFreshPicked": True,
            "rating": 5,
            "createdAt": "2024-01-08T08:00:00Z",
        })

        assert product.id == 7
        assert product.price == 1500.0
        assert product.category_id == 2
        assert product.is_fresh_picked
        assert not product.is_organic
        assert product.created_at.year == 2024

    def test_product_from_snake_case(self):
        product = Product.from_dict({
            "id": 1,
            "name": "Carrots",
            "price": 320,
            "category_id": 1,
            "is_organic": True,
            "created_at": datetime(2024, 1, 2),
        })

        assert product.is_organic
        assert product.rating == 0.0

    def test_missing_rating_defaults_to_zero(self):
        product = Product.from_dict({"id": 1, "name": "Leeks", "price": 280})
        assert product.rating == 0.0
        assert product.location is None

    @pytest.mark.parametrize(
        "raw,expected",
        [
            (True, True),
            ("true", True),
            ("TRUE", True),
            ("false", False),
            ("no", False),
            (None, False),
            (False, False),
        ],
    )
    def test_flag_values(self, raw, expected):
        product = Product.from_dict({
            "id": 1, "name": "Carrots", "price": 320, "isOrganic": raw, "featured": raw,
        })

        assert product.is_organic is expected
        assert product.featured is expected

    def test_string_false_fails_flag_filter(self):
        product = Product.from_dict({"id": 1, "name": "Leeks", "price": 280, "isLocal": "false"})
        assert filter_products([product], FilterState(local_only=True)) == []

    @pytest.mark.parametrize(
        "record",
        [
            {"name": "No id", "price": 1},
            {"id": 1, "price": 1},
            {"id": 1, "name": "No price"},
            {"id": 1, "name": "Bad price", "price": "cheap"},
        ],
    )
    def test_malformed_product(self, record):
        with pytest.raises(ValueError):
            Product.from_dict(record)

    def test_product_to_dict_is_camel_case(self):
        data = Product(id=1, name="Carrots", price=320.0, is_organic=True).to_dict()

        assert data["isOrganic"] is True
        assert data["createdAt"] is None

    def test_category_from_dict(self):
        category = Category.from_dict({"id": 1, "name": "Vegetables", "imageUrl": "/v.png"})

        assert category.image_url == "/v.png"

        with pytest.raises(ValueError):
            Category.from_dict({"name": "No id"})
