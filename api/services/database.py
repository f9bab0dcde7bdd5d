"""Database connection service for FastAPI."""

import duckdb
from typing import Optional
from pathlib import Path

from api.config import get_settings


class DatabaseService:
    """Manages the DuckDB connection used by request handlers."""

    def __init__(
        self,
        db_path: Optional[Path] = None,
        connection: Optional[duckdb.DuckDBPyConnection] = None,
    ):
        """Initialize database service.

        Args:
            db_path: Path to database file.
            connection: Existing connection to use instead of opening one
                (e.g. an in-memory database in tests).
        """
        settings = get_settings()
        self.db_path = db_path or settings.database_path
        self._connection: Optional[duckdb.DuckDBPyConnection] = connection

    def connect(self) -> duckdb.DuckDBPyConnection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = duckdb.connect(str(self.db_path), read_only=True)
        return self._connection

    def execute(self, query: str, params: Optional[list] = None):
        """Execute a query and return results."""
        conn = self.connect()
        if params:
            return conn.execute(query, params)
        return conn.execute(query)

    def fetch_one(self, query: str, params: Optional[list] = None):
        """Execute query and fetch one result."""
        return self.execute(query, params).fetchone()

    def fetch_dicts(self, query: str, params: Optional[list] = None) -> list[dict]:
        """Execute query and return rows as column-name dictionaries."""
        cursor = self.execute(query, params)
        columns = [col[0] for col in cursor.description]
        return [dict(zip(columns, row)) for row in cursor.fetchall()]

    def close(self) -> None:
        """Close the database connection."""
        if self._connection:
            self._connection.close()
            self._connection = None


# Global database instance
_db_service: Optional[DatabaseService] = None


def get_db() -> DatabaseService:
    """Get global database service instance."""
    global _db_service
    if _db_service is None:
        _db_service = DatabaseService()
    return _db_service


def close_db() -> None:
    """Close the global database connection."""
    global _db_service
    if _db_service is not None:
        _db_service.close()
        _db_service = None
