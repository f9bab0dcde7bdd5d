"""DuckDB schema definitions for the UrbanFood store.

Tables mirror the storefront's relational model:
- users, vendors (farmers), categories, products
- reviews (source of product ratings)
- orders, order_items
"""

from typing import Optional
import duckdb

from config.logging_config import get_logger

logger = get_logger("schema")

SCHEMA_VERSION = "1.0"

# =============================================================================
# CONSTRAINT NOTES
# =============================================================================
# DuckDB does not enforce every foreign key; they are declared for
# documentation.
#
# Key Relationships:
# - vendors.user_id -> users.id
# - products.vendor_id -> vendors.id
# - products.category_id -> categories.id
# - reviews.product_id -> products.id
# - orders.user_id -> users.id
# - order_items.order_id -> orders.id
# - order_items.product_id -> products.id
# =============================================================================

CREATE_USERS = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY,
    username VARCHAR NOT NULL UNIQUE,
    password VARCHAR NOT NULL,
    email VARCHAR NOT NULL UNIQUE,
    first_name VARCHAR NOT NULL,
    last_name VARCHAR NOT NULL,
    role VARCHAR NOT NULL DEFAULT 'customer',
    is_verified BOOLEAN NOT NULL DEFAULT false,
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp,
    updated_at TIMESTAMP NOT NULL DEFAULT current_timestamp
)
"""

CREATE_CATEGORIES = """
CREATE TABLE IF NOT EXISTS categories (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL UNIQUE,
    description VARCHAR,
    image_url VARCHAR,
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp,
    updated_at TIMESTAMP NOT NULL DEFAULT current_timestamp
)
"""

CREATE_VENDORS = """
CREATE TABLE IF NOT EXISTS vendors (
    id INTEGER PRIMARY KEY,
    user_id INTEGER NOT NULL UNIQUE,
    business_name VARCHAR NOT NULL,
    description VARCHAR,
    logo_url VARCHAR,
    address VARCHAR,
    city VARCHAR,
    state VARCHAR,
    postal_code VARCHAR,
    country VARCHAR NOT NULL DEFAULT 'Sri Lanka',
    phone VARCHAR,
    business_email VARCHAR,
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp,
    updated_at TIMESTAMP NOT NULL DEFAULT current_timestamp
)
"""

CREATE_PRODUCTS = """
CREATE TABLE IF NOT EXISTS products (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL,
    description VARCHAR,
    price DOUBLE NOT NULL CHECK (price >= 0),
    inventory INTEGER NOT NULL DEFAULT 0,
    image_url VARCHAR,
    vendor_id INTEGER NOT NULL,
    category_id INTEGER NOT NULL,
    unit VARCHAR,
    is_organic BOOLEAN DEFAULT false,
    is_local BOOLEAN DEFAULT true,
    is_fresh_picked BOOLEAN DEFAULT false,
    featured BOOLEAN DEFAULT false,
    weight_kg DOUBLE,
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp,
    updated_at TIMESTAMP NOT NULL DEFAULT current_timestamp
)
"""

CREATE_REVIEWS = """
CREATE TABLE IF NOT EXISTS reviews (
    id INTEGER PRIMARY KEY,
    user_id INTEGER NOT NULL,
    product_id INTEGER NOT NULL,
    rating INTEGER NOT NULL CHECK (rating BETWEEN 1 AND 5),
    title VARCHAR,
    comment VARCHAR,
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp
)
"""

CREATE_ORDERS = """
CREATE TABLE IF NOT EXISTS orders (
    id INTEGER PRIMARY KEY,
    user_id INTEGER NOT NULL,
    status VARCHAR NOT NULL DEFAULT 'pending',
    total DOUBLE NOT NULL,
    shipping_address VARCHAR NOT NULL,
    shipping_city VARCHAR NOT NULL,
    shipping_postal_code VARCHAR,
    shipping_country VARCHAR NOT NULL DEFAULT 'Sri Lanka',
    shipping_method VARCHAR NOT NULL,
    shipping_fee DOUBLE NOT NULL,
    payment_method VARCHAR NOT NULL,
    payment_status VARCHAR NOT NULL DEFAULT 'pending',
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp,
    updated_at TIMESTAMP NOT NULL DEFAULT current_timestamp
)
"""

CREATE_ORDER_ITEMS = """
CREATE TABLE IF NOT EXISTS order_items (
    id INTEGER PRIMARY KEY,
    order_id INTEGER NOT NULL,
    product_id INTEGER NOT NULL,
    quantity INTEGER NOT NULL CHECK (quantity > 0),
    price_at_time DOUBLE NOT NULL,
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp
)
"""

CREATE_APP_SETTINGS = """
CREATE TABLE IF NOT EXISTS app_settings (
    key VARCHAR PRIMARY KEY,
    value VARCHAR,
    updated_at TIMESTAMP DEFAULT current_timestamp
)
"""

# Product listing as the storefront reads it: vendor city becomes the
# location label and reviews are averaged into a rating.
CREATE_PRODUCT_LISTING_VIEW = """
CREATE OR REPLACE VIEW product_listing AS
SELECT
    p.id,
    p.name,
    p.description,
    p.price,
    p.inventory,
    p.image_url,
    p.vendor_id,
    p.category_id,
    p.unit,
    p.is_organic,
    p.is_local,
    p.is_fresh_picked,
    p.featured,
    p.created_at,
    v.city AS location,
    COALESCE(r.avg_rating, 0) AS rating
FROM products p
LEFT JOIN vendors v ON v.id = p.vendor_id
LEFT JOIN (
    SELECT product_id, ROUND(AVG(rating), 1) AS avg_rating
    FROM reviews
    GROUP BY product_id
) r ON r.product_id = p.id
"""

TABLES = [
    ("users", CREATE_USERS),
    ("categories", CREATE_CATEGORIES),
    ("vendors", CREATE_VENDORS),
    ("products", CREATE_PRODUCTS),
    ("reviews", CREATE_REVIEWS),
    ("orders", CREATE_ORDERS),
    ("order_items", CREATE_ORDER_ITEMS),
    ("app_settings", CREATE_APP_SETTINGS),
]

CREATE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_products_category ON products(category_id)",
    "CREATE INDEX IF NOT EXISTS idx_products_vendor ON products(vendor_id)",
    "CREATE INDEX IF NOT EXISTS idx_reviews_product ON reviews(product_id)",
    "CREATE INDEX IF NOT EXISTS idx_order_items_order ON order_items(order_id)",
]


def create_all_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """
    Create all database tables and the product listing view.

    Args:
        conn: DuckDB connection.
    """
    for table_name, create_sql in TABLES:
        try:
            conn.execute(create_sql)
            logger.info(f"Created table: {table_name}")
        except Exception as e:
            logger.error(f"Error creating table {table_name}: {e}")
            raise

    conn.execute(CREATE_PRODUCT_LISTING_VIEW)


def create_all_indexes(conn: duckdb.DuckDBPyConnection) -> None:
    """
    Create all database indexes.

    Args:
        conn: DuckDB connection.
    """
    for index_sql in CREATE_INDEXES:
        conn.execute(index_sql)

    logger.info(f"Created {len(CREATE_INDEXES)} indexes")


def initialize_database(conn: duckdb.DuckDBPyConnection) -> None:
    """
    Initialize the database with all tables and indexes.

    Args:
        conn: DuckDB connection.
    """
    logger.info("Initializing database schema...")
    create_all_tables(conn)
    create_all_indexes(conn)

    conn.execute(
        "INSERT OR REPLACE INTO app_settings (key, value) VALUES ('schema_version', ?)",
        [SCHEMA_VERSION],
    )

    logger.info("Database initialization complete")


def get_schema_version(conn: duckdb.DuckDBPyConnection) -> Optional[str]:
    """
    Get the current schema version.

    Args:
        conn: DuckDB connection.

    Returns:
        Schema version string or None.
    """
    try:
        result = conn.execute(
            "SELECT value FROM app_settings WHERE key = 'schema_version'"
        ).fetchone()
        return result[0] if result else None
    except duckdb.CatalogException:
        return None


def get_table_counts(conn: duckdb.DuckDBPyConnection) -> dict:
    """
    Get row counts for all main tables.

    Args:
        conn: DuckDB connection.

    Returns:
        Dictionary mapping table names to row counts. Missing tables count 0.
    """
    counts = {}
    for table, _ in TABLES:
        if table == "app_settings":
            continue
        try:
            result = conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()
            counts[table] = result[0] if result else 0
        except duckdb.CatalogException:
            counts[table] = 0

    return counts


def drop_all_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """
    Drop all tables (use with caution!).

    Args:
        conn: DuckDB connection.
    """
    conn.execute("DROP VIEW IF EXISTS product_listing")
    for table, _ in reversed(TABLES):
        conn.execute(f"DROP TABLE IF EXISTS {table}")
        logger.info(f"Dropped table: {table}")
