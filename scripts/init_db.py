#!/usr/bin/env python
"""
Create (and optionally seed) the UrbanFood catalog database.

Usage:
    python scripts/init_db.py [options]

Options:
    --db PATH       Custom database path
    --seed          Load the sample catalog after creating the schema
    --reset         Drop all tables first
    --log-level     Logging level
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import setup_logging, get_logger, DEFAULT_LOG_FILE
from src.database import (
    drop_all_tables,
    get_connection,
    get_schema_version,
    get_table_counts,
    initialize_database,
    seed_sample_data,
)


def main():
    """Main entry point for database initialization."""
    parser = argparse.ArgumentParser(
        description="Initialize the UrbanFood DuckDB database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=config.database.path,
        help="Custom database path",
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Load the sample catalog",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop all tables before creating them",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=config.app.log_level,
        help="Logging level",
    )

    args = parser.parse_args()

    setup_logging(log_level=args.log_level, log_file=DEFAULT_LOG_FILE)
    logger = get_logger("init_db")

    if args.db == config.database.path:
        config.ensure_directories()

    logger.info(f"Database path: {args.db}")

    try:
        with get_connection(args.db) as conn:
            if args.reset:
                logger.warning("Dropping all tables")
                drop_all_tables(conn)

            initialize_database(conn)

            if args.seed:
                if get_table_counts(conn).get("products", 0) > 0:
                    logger.warning("Products already present, skipping seed (use --reset)")
                else:
                    seed_sample_data(conn)

            logger.info("Table row counts:")
            for table, count in get_table_counts(conn).items():
                logger.info(f"  {table}: {count:,}")
            logger.info(f"Schema version: {get_schema_version(conn)}")

        logger.info("Next steps:")
        logger.info("  1. Run: uvicorn api.main:app --reload")
        logger.info("  2. Open: http://localhost:8000/docs")
        return 0

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Error initializing database: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
