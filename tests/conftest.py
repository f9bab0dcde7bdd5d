"""Pytest configuration and fixtures for UrbanFood tests."""

import pytest
from datetime import datetime, timedelta

from src.catalog import Product
from src.database import get_memory_connection, initialize_database, seed_sample_data


@pytest.fixture
def test_db():
    """Create in-memory DuckDB with the schema and sample catalog."""
    conn = get_memory_connection()
    initialize_database(conn)
    seed_sample_data(conn)

    yield conn
    conn.close()


@pytest.fixture
def empty_db():
    """In-memory DuckDB with the schema but no rows."""
    conn = get_memory_connection()
    initialize_database(conn)

    yield conn
    conn.close()


@pytest.fixture
def sample_products():
    """Small hand-built catalog in server (featured) order."""
    epoch = datetime(2024, 3, 1)
    return [
        Product(
            id=1, name="Carrots", price=320.0, category_id=1, location="Nuwara Eliya",
            is_organic=True, is_local=True, is_fresh_picked=True, rating=4.7,
            created_at=epoch + timedelta(days=1),
        ),
        Product(
            id=2, name="Leeks", price=280.0, category_id=1, location="Nuwara Eliya",
            is_local=True, is_fresh_picked=True, rating=4.0,
            created_at=epoch + timedelta(days=5),
        ),
        Product(
            id=3, name="King Coconut", price=120.0, category_id=2, location="Kandy",
            is_organic=True, is_local=True, is_fresh_picked=True, rating=3.9,
            created_at=epoch + timedelta(days=3),
        ),
        Product(
            id=4, name="Mangosteen", price=1500.0, category_id=2, location="Kandy",
            is_fresh_picked=True, rating=5.0,
            created_at=epoch + timedelta(days=2),
        ),
        Product(
            id=5, name="Buffalo Curd", price=850.0, category_id=3, location="Colombo",
            is_local=True, rating=4.5,
        ),
        Product(
            id=6, name="Aged Cheddar", price=5000.0, category_id=3, location="Colombo",
            rating=0.0, created_at=epoch + timedelta(days=4),
        ),
    ]

