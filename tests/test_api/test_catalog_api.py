"""Tests for catalog API endpoints."""

import pytest


def product_ids(response):
    return [p["id"] for p in response.json()["products"]]


class TestSearchCatalog:
    """Tests for GET /api/catalog endpoint."""

    def test_search_default(self, client):
        """Unfiltered catalog, first page in featured order."""
        response = client.get("/api/catalog")
        assert response.status_code == 200

        data = response.json()
        assert product_ids(response) == list(range(1, 10))
        assert data["pagination"]["total"] == 16
        assert data["pagination"]["total_pages"] == 2
        assert data["pagination"]["page_numbers"] == [1, 2]
        assert data["active_filter_count"] == 0
        assert data["summary"] == "All products (no filters)"

    def test_second_page(self, client):
        response = client.get("/api/catalog", params={"page": 2})

        assert product_ids(response) == list(range(10, 17))
        assert response.json()["pagination"]["has_next"] is False

    def test_page_past_end(self, client):
        response = client.get("/api/catalog", params={"page": 5})
        assert response.status_code == 200

        data = response.json()
        assert data["products"] == []
        assert data["pagination"]["total_pages"] == 2

    def test_page_size(self, client):
        response = client.get("/api/catalog", params={"page_size": 4})

        assert len(response.json()["products"]) == 4
        assert response.json()["pagination"]["total_pages"] == 4

    def test_filter_by_categories(self, client):
        response = client.get("/api/catalog", params={"category_ids": "1,2"})

        assert product_ids(response) == list(range(1, 9))
        assert response.json()["filters"]["category_ids"] == [1, 2]

    def test_filter_by_location(self, client):
        response = client.get("/api/catalog", params={"locations": "Kandy"})
        assert product_ids(response) == [4, 5, 6, 7, 8]

    def test_filter_organic(self, client):
        response = client.get("/api/catalog", params={"organic_only": True})
        assert product_ids(response) == [1, 4, 5, 6, 12, 14, 15]

    def test_filter_rating(self, client):
        response = client.get("/api/catalog", params={"rating": 4})
        assert product_ids(response) == [1, 2, 5, 7, 9, 14]

    def test_price_range_and_sort(self, client):
        response = client.get(
            "/api/catalog",
            params={"price_min": 100, "price_max": 300, "sort_by": "price-low"},
        )

        assert product_ids(response) == [5, 13, 3, 2]
        assert response.json()["active_filter_count"] == 1

    def test_inverted_price_range(self, client):
        response = client.get("/api/catalog", params={"price_min": 900, "price_max": 100})

        data = response.json()
        assert data["products"] == []
        assert data["pagination"]["total"] == 0

    def test_newest_first(self, client):
        response = client.get("/api/catalog", params={"sort_by": "newest", "page_size": 3})
        assert product_ids(response) == [16, 15, 14]

    def test_combined_filters(self, client):
        response = client.get(
            "/api/catalog",
            params={"locations": "Kandy,Jaffna", "organic_only": True, "rating": 3},
        )

        assert product_ids(response) == [4, 5, 6, 14, 15]
        assert response.json()["active_filter_count"] == 3

    def test_search_name(self, client):
        response = client.get("/api/catalog", params={"search": "CARROT"})

        assert product_ids(response) == [1]
        assert response.json()["filters"]["search"] == "CARROT"
        assert response.json()["active_filter_count"] == 0

    def test_search_description(self, client):
        response = client.get("/api/catalog", params={"search": "clay pot"})
        assert product_ids(response) == [9]

    def test_search_with_filters(self, client):
        response = client.get(
            "/api/catalog",
            params={"search": "co", "organic_only": True, "sort_by": "price-high"},
        )
        assert product_ids(response) == [14, 1, 5]

    @pytest.mark.parametrize(
        "params",
        [
            {"category_ids": "1,veg"},
            {"rating": 6},
            {"sort_by": "cheapest"},
            {"page": 0},
        ],
    )
    def test_invalid_params(self, client, params):
        response = client.get("/api/catalog", params=params)
        assert response.status_code == 422

    def test_not_cached(self, client):
        response = client.get("/api/catalog")
        assert response.headers["Cache-Control"] == "no-cache"


class TestCatalogOptions:
    """Tests for filter option endpoints."""

    def test_locations(self, client):
        response = client.get("/api/catalog/locations")
        assert response.status_code == 200
        assert response.json() == ["Nuwara Eliya", "Kandy", "Colombo", "Jaffna"]

    def test_options(self, client):
        response = client.get("/api/catalog/options")
        assert response.status_code == 200

        data = response.json()
        assert len(data["categories"]) == 5
        assert data["price"] == {"min": 0, "max": 5000}
        assert [o["value"] for o in data["sort_options"]] == [
            "featured", "price-low", "price-high", "newest"
        ]
        assert data["page_size_options"] == [9, 18, 36]
        assert response.headers["Cache-Control"].startswith("public")


class TestApplyFilterChange:
    """Tests for POST /api/catalog/filters endpoint."""

    def test_toggle_category(self, client):
        response = client.post(
            "/api/catalog/filters",
            json={"change": {"kind": "toggle-category", "category_id": 2}},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["state"]["category_ids"] == [2]
        assert data["active_filter_count"] == 1

    def test_toggle_back_off(self, client):
        response = client.post(
            "/api/catalog/filters",
            json={
                "state": {"category_ids": [2]},
                "change": {"kind": "toggle-category", "category_id": 2},
            },
        )
        assert response.json()["state"]["category_ids"] == []

    def test_price_bounds_may_cross(self, client):
        response = client.post(
            "/api/catalog/filters",
            json={
                "state": {"price_range": [0, 300]},
                "change": {"kind": "set-price-min", "value": 800},
            },
        )
        assert response.json()["state"]["price_range"] == [800, 300]

    def test_clear_all(self, client):
        response = client.post(
            "/api/catalog/filters",
            json={
                "state": {
                    "category_ids": [1],
                    "locations": ["Kandy"],
                    "organic_only": True,
                    "rating": 4,
                    "sort_by": "newest",
                },
                "change": {"kind": "clear-all"},
            },
        )

        data = response.json()
        assert data["active_filter_count"] == 0
        assert data["state"]["sort_by"] == "featured"
        assert data["state"]["locations"] == []

    def test_set_sort(self, client):
        response = client.post(
            "/api/catalog/filters",
            json={"change": {"kind": "set-sort", "sort_by": "price-high"}},
        )
        assert response.json()["state"]["sort_by"] == "price-high"
        assert response.json()["active_filter_count"] == 0

    def test_set_search(self, client):
        response = client.post(
            "/api/catalog/filters",
            json={
                "state": {"organic_only": True},
                "change": {"kind": "set-search", "text": " mango "},
            },
        )

        data = response.json()
        assert data["state"]["search"] == "mango"
        assert data["state"]["organic_only"] is True
        assert data["active_filter_count"] == 1

    @pytest.mark.parametrize(
        "change",
        [
            {"kind": "set-rating", "level": 7},
            {"kind": "set-sort", "sort_by": "random"},
            {"kind": "shuffle"},
            {"category_id": 1},
        ],
    )
    def test_invalid_change(self, client, change):
        response = client.post("/api/catalog/filters", json={"change": change})
        assert response.status_code == 422
