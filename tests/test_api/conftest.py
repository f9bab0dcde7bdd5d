"""Pytest fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.services.cache import TTLCache
from api.services.catalog import CatalogService, get_catalog_service
from api.services.database import DatabaseService, get_db


@pytest.fixture
def catalog_service(test_db):
    """Catalog service reading the seeded in-memory database."""
    return CatalogService(DatabaseService(connection=test_db), cache=TTLCache(maxsize=4, ttl=60))


@pytest.fixture
def client(catalog_service):
    """Create a TestClient with the database dependencies overridden."""
    app.dependency_overrides[get_db] = lambda: catalog_service.db
    app.dependency_overrides[get_catalog_service] = lambda: catalog_service

    yield TestClient(app)

    app.dependency_overrides.clear()
