#!/usr/bin/env python3
"""
Database initialization.
Run this to create all tables on the configured store.
"""

import logging

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from .connection import Base, DatabaseConnection
from .models import StudentRow  # noqa: F401  (registers the table on Base.metadata)

logger = logging.getLogger(__name__)

EXPECTED_TABLES = {'students'}


def init_database(db: DatabaseConnection, drop_existing=False) -> bool:
    """
    Initialize the database by creating all tables.

    Args:
        db: Connection handle to create the schema on
        drop_existing (bool): If True, drop all existing tables first (DANGER!)

    Returns:
        True if the schema is in place, False if the store is unusable or DDL failed
    """
    if not db.open():
        logger.error("Error initializing database: store is unavailable")
        return False

    logger.info(f"Initializing database at: {db.url}")

    try:
        if drop_existing:
            logger.warning("Dropping all existing tables...")
            Base.metadata.drop_all(bind=db.engine)
            logger.info("Tables dropped.")

        Base.metadata.create_all(bind=db.engine)
    except SQLAlchemyError as e:
        logger.error(f"Error initializing database: {e}")
        return False

    for table in Base.metadata.sorted_tables:
        logger.info(f"  - {table.name}")
    logger.info("Database initialized successfully.")
    return True


def verify_database(db: DatabaseConnection) -> bool:
    """Verify database connection and tables exist"""
    if not db.open():
        return False

    tables = inspect(db.engine).get_table_names()
    missing_tables = EXPECTED_TABLES - set(tables)

    if missing_tables:
        logger.error(f"Missing tables: {missing_tables}")
        return False

    return True


if __name__ == '__main__':
    from config import configure_logging, get_settings

    configure_logging(get_settings().log_level)
    with DatabaseConnection() as db:
        init_database(db)
        verify_database(db)
