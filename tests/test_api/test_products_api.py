"""Tests for product and category API endpoints."""


class TestListProducts:
    """Tests for GET /api/products endpoint."""

    def test_list_all(self, client):
        response = client.get("/api/products")
        assert response.status_code == 200

        data = response.json()
        assert len(data) == 16
        assert [p["id"] for p in data] == list(range(1, 17))

    def test_product_fields(self, client):
        carrots = client.get("/api/products").json()[0]

        assert carrots["name"] == "Carrots"
        assert carrots["location"] == "Nuwara Eliya"
        assert carrots["rating"] == 4.7
        assert carrots["isOrganic"] is True
        assert carrots["categoryId"] == 1

    def test_unreviewed_product_rating(self, client):
        cabbage = client.get("/api/products/3").json()
        assert cabbage["rating"] == 0

    def test_featured(self, client):
        response = client.get("/api/products", params={"featured": "true"})
        assert [p["id"] for p in response.json()] == [1, 5, 9, 14]

    def test_by_category(self, client):
        response = client.get("/api/products", params={"categoryId": 5})
        assert [p["id"] for p in response.json()] == [14, 15, 16]

    def test_by_vendor(self, client):
        response = client.get("/api/products", params={"vendorId": 3})
        assert [p["id"] for p in response.json()] == [9, 10, 11, 12, 13]

    def test_featured_takes_precedence(self, client):
        response = client.get("/api/products", params={"featured": "true", "categoryId": 2})
        assert [p["id"] for p in response.json()] == [1, 5, 9, 14]

    def test_search(self, client):
        response = client.get("/api/products", params={"search": "Coconut"})
        assert [p["id"] for p in response.json()] == [5]

    def test_search_within_category(self, client):
        response = client.get("/api/products", params={"categoryId": 5, "search": "pepper"})
        assert [p["id"] for p in response.json()] == [15]

    def test_search_no_match(self, client):
        response = client.get("/api/products", params={"search": "durian"})
        assert response.json() == []

    def test_cache_header(self, client):
        response = client.get("/api/products")
        assert response.headers["Cache-Control"] == "public, max-age=300"


class TestGetProduct:
    """Tests for GET /api/products/{id} endpoint."""

    def test_get_product(self, client):
        response = client.get("/api/products/7")
        assert response.status_code == 200

        data = response.json()
        assert data["name"] == "Mangosteen"
        assert data["location"] == "Kandy"
        assert data["rating"] == 5.0

    def test_not_found(self, client):
        response = client.get("/api/products/999")
        assert response.status_code == 404


class TestCategories:
    """Tests for category endpoints."""

    def test_list_categories(self, client):
        response = client.get("/api/categories")
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == [
            "Vegetables", "Fruits", "Dairy", "Bakery", "Spices"
        ]

    def test_get_category(self, client):
        response = client.get("/api/categories/2")
        assert response.json()["name"] == "Fruits"

    def test_category_not_found(self, client):
        response = client.get("/api/categories/99")
        assert response.status_code == 404


class TestHealth:
    """Tests for root and health endpoints."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "catalog" in response.json()["endpoints"]

    def test_health(self, client):
        response = client.get("/health")

        data = response.json()
        assert data["status"] == "healthy"
        assert data["total_products"] == 16
