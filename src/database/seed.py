"""Sample catalog data for development and tests."""

from datetime import datetime, timedelta

import duckdb

from config.logging_config import get_logger

logger = get_logger("seed")

SAMPLE_CATEGORIES = [
    (1, "Vegetables", "Fresh vegetables from local farms"),
    (2, "Fruits", "Seasonal and tropical fruits"),
    (3, "Dairy", "Milk, curd and cheese"),
    (4, "Bakery", "Breads and baked goods"),
    (5, "Spices", "Ceylon spices and blends"),
]

SAMPLE_USERS = [
    (1, "kamal", "kamal@example.lk", "Kamal", "Perera", "vendor"),
    (2, "nimali", "nimali@example.lk", "Nimali", "Silva", "vendor"),
    (3, "ruwan", "ruwan@example.lk", "Ruwan", "Fernando", "vendor"),
    (4, "shanthi", "shanthi@example.lk", "Shanthi", "Kumar", "vendor"),
    (5, "amaya", "amaya@example.lk", "Amaya", "Jayasuriya", "customer"),
]

# (id, user_id, business_name, city)
SAMPLE_VENDORS = [
    (1, 1, "Perera Green Farm", "Nuwara Eliya"),
    (2, 2, "Silva Organics", "Kandy"),
    (3, 3, "Fernando Dairy", "Colombo"),
    (4, 4, "Jaffna Spice Garden", "Jaffna"),
]

# (id, name, price, vendor_id, category_id, unit, organic, local, fresh_picked, featured)
SAMPLE_PRODUCTS = [
    (1, "Carrots", 320.0, 1, 1, "kg", True, True, True, True),
    (2, "Leeks", 280.0, 1, 1, "kg", False, True, True, False),
    (3, "Cabbage", 210.0, 1, 1, "each", False, True, False, False),
    (4, "Red Rice", 450.0, 2, 1, "kg", True, True, False, False),
    (5, "King Coconut", 120.0, 2, 2, "each", True, True, True, True),
    (6, "Rambutan", 900.0, 2, 2, "kg", True, True, True, False),
    (7, "Mangosteen", 1500.0, 2, 2, "kg", False, False, True, False),
    (8, "Pineapple", 380.0, 2, 2, "each", False, True, False, False),
    (9, "Buffalo Curd", 850.0, 3, 3, "clay pot", False, True, False, True),
    (10, "Fresh Milk", 400.0, 3, 3, "litre", False, True, True, False),
    (11, "Aged Cheddar", 4200.0, 3, 3, "500 g", False, False, False, False),
    (12, "Kithul Jaggery", 1100.0, 3, 4, "500 g", True, True, False, False),
    (13, "Roast Paan", 150.0, 3, 4, "loaf", False, True, True, False),
    (14, "Ceylon Cinnamon", 2400.0, 4, 5, "100 g", True, True, False, True),
    (15, "Black Pepper", 1800.0, 4, 5, "250 g", True, True, False, False),
    (16, "Curry Powder", 650.0, 4, 5, "250 g", False, True, False, False),
]

SAMPLE_DESCRIPTIONS = {
    1: "Crunchy upcountry carrots, harvested the morning of delivery",
    5: "Thambili, the orange drinking coconut",
    9: "Buffalo milk curd set in a traditional clay pot",
    14: "True cinnamon quills from the southern coast",
}

# (product_id, [ratings])
SAMPLE_REVIEWS = [
    (1, [5, 4, 5]),
    (2, [4]),
    (4, [3, 4]),
    (5, [5, 5]),
    (6, [4, 4, 3]),
    (7, [5]),
    (9, [5, 4]),
    (11, [2, 3]),
    (14, [5, 5, 4]),
    (15, [4, 3]),
]

SEED_EPOCH = datetime(2024, 1, 1, 8, 0, 0)


def seed_sample_data(conn: duckdb.DuckDBPyConnection) -> dict:
    """
    Insert the sample catalog into an initialized database.

    Products are created one day apart (product 1 is the oldest) so the
    "newest" ordering is deterministic.

    Args:
        conn: DuckDB connection with the schema already created.

    Returns:
        Dictionary of table name to inserted row count.
    """
    conn.executemany(
        "INSERT INTO categories (id, name, description) VALUES (?, ?, ?)",
        SAMPLE_CATEGORIES,
    )
    conn.executemany(
        "INSERT INTO users (id, username, password, email, first_name, last_name, role) "
        "VALUES (?, ?, 'changeme', ?, ?, ?, ?)",
        SAMPLE_USERS,
    )
    conn.executemany(
        "INSERT INTO vendors (id, user_id, business_name, city) VALUES (?, ?, ?, ?)",
        SAMPLE_VENDORS,
    )
    conn.executemany(
        """
        INSERT INTO products (
            id, name, price, vendor_id, category_id, unit,
            is_organic, is_local, is_fresh_picked, featured, inventory, created_at,
            description
        ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, 50, ?, ?)
        """,
        [
            row + (SEED_EPOCH + timedelta(days=row[0]), SAMPLE_DESCRIPTIONS.get(row[0]))
            for row in SAMPLE_PRODUCTS
        ],
    )

    review_rows = []
    review_id = 1
    for product_id, ratings in SAMPLE_REVIEWS:
        for rating in ratings:
            review_rows.append((review_id, 5, product_id, rating, "Review"))
            review_id += 1
    conn.executemany(
        "INSERT INTO reviews (id, user_id, product_id, rating, comment) VALUES (?, ?, ?, ?, ?)",
        review_rows,
    )

    counts = {
        "categories": len(SAMPLE_CATEGORIES),
        "users": len(SAMPLE_USERS),
        "vendors": len(SAMPLE_VENDORS),
        "products": len(SAMPLE_PRODUCTS),
        "reviews": len(review_rows),
    }
    logger.info(f"Seeded sample data: {counts}")
    return counts
