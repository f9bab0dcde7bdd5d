"""API services."""

from api.services.database import get_db, DatabaseService
from api.services.catalog import CatalogService, get_catalog_service
from api.services.cache import TTLCache

__all__ = ["get_db", "DatabaseService", "CatalogService", "get_catalog_service", "TTLCache"]
