"""Database module for DuckDB operations."""

from .connection import (
    DatabaseConnection,
    get_connection,
    get_memory_connection,
)
from .schema import (
    initialize_database,
    create_all_tables,
    create_all_indexes,
    get_schema_version,
    get_table_counts,
    drop_all_tables,
)
from .seed import seed_sample_data

__all__ = [
    # Connection
    "DatabaseConnection",
    "get_connection",
    "get_memory_connection",
    # Schema
    "initialize_database",
    "create_all_tables",
    "create_all_indexes",
    "get_schema_version",
    "get_table_counts",
    "drop_all_tables",
    # Seed
    "seed_sample_data",
]
