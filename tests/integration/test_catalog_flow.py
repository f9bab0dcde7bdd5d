"""
End-to-end catalog flow over a file-backed database.

Builds a seeded DuckDB file the way scripts/init_db.py does, reopens it
read-only through the API services and browses it with a CatalogSession.
"""

import pytest

from api.services.cache import TTLCache
from api.services.catalog import CatalogService
from api.services.database import DatabaseService
from src.catalog import CatalogSession, SetOrganic, SetSort, ToggleLocation
from src.database import get_connection, initialize_database, seed_sample_data


@pytest.fixture
def seeded_path(tmp_path):
    db_path = tmp_path / "urbanfood.duckdb"
    with get_connection(db_path) as conn:
        initialize_database(conn)
        seed_sample_data(conn)
    return db_path


@pytest.fixture
def service(seeded_path):
    db = DatabaseService(db_path=seeded_path)
    yield CatalogService(db, cache=TTLCache(maxsize=4, ttl=60))
    db.close()


class TestCatalogFlow:
    """Browse the seeded catalog end to end."""

    def test_session_over_service(self, service):
        with CatalogSession(service.load_catalog(), page_size=3) as session:
            assert session.page.total_pages == 6

            session.dispatch(ToggleLocation("Kandy"))
            session.dispatch(SetOrganic(True))
            session.dispatch(SetSort("price-high"))

            assert [p.name for p in session.results] == [
                "Rambutan", "Red Rice", "King Coconut"
            ]
            assert session.page.page_numbers == [1]
            assert session.active_filter_count == 2

    def test_catalog_is_cached(self, service):
        first = service.load_catalog()
        assert service.load_catalog() is first

        assert service.invalidate() == 1
        assert service.load_catalog() is not first
