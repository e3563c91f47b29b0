"""
Database schema initialization and startup migrations
"""

import os
import shutil
import sqlite3
import logging

logger = logging.getLogger(__name__)


def ensure_database_directory(db_file):
    """Create the directory holding the database file"""
    directory = os.path.dirname(os.path.abspath(db_file))
    os.makedirs(directory, exist_ok=True)
    return directory


def migrate_legacy_database(legacy_file, db_file) -> bool:
    """Move a database left at the project root into the managed location.

    Runs only when the legacy file exists and nothing is at the new location
    yet, so calling it on every boot is harmless. Failures are logged and
    swallowed; the app then starts with a fresh database.
    """
    try:
        if os.path.exists(legacy_file) and not os.path.exists(db_file):
            shutil.move(legacy_file, db_file)
            logger.info(f"Moved legacy database {legacy_file} -> {db_file}")
            return True
    except OSError as e:
        logger.warning(f"Legacy database migration failed: {e}")
    return False


def init_database_schema(conn):
    """Initialize database schema with all tables"""

    # Enable WAL mode for better concurrency
    conn.execute("PRAGMA journal_mode=WAL")

    _create_catalog_tables(conn)
    _create_indexes(conn)

    conn.commit()
    logger.info("✅ Database schema initialized")


def _create_catalog_tables(conn):
    """Create category and script tables"""
    conn.execute('''CREATE TABLE IF NOT EXISTS categories (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL UNIQUE,
        slug TEXT NOT NULL UNIQUE
    )''')

    # category_id is not enforced: deleting a category leaves scripts pointing at it
    conn.execute('''CREATE TABLE IF NOT EXISTS scripts (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT NOT NULL,
        slug TEXT NOT NULL UNIQUE,
        description TEXT,
        code TEXT NOT NULL,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        category_id INTEGER,
        FOREIGN KEY(category_id) REFERENCES categories(id)
    )''')


def _create_indexes(conn):
    """Create database indexes for performance"""
    try:
        conn.execute("CREATE INDEX IF NOT EXISTS idx_scripts_category ON scripts(category_id)")
        conn.execute("CREATE INDEX IF NOT EXISTS idx_scripts_created_at ON scripts(created_at)")
    except sqlite3.Error as e:
        logger.warning(f"Index creation warning: {e}")


def initialize_database(database, default_categories=None, legacy_file=None):
    """Run the startup steps in order: directory, legacy move, schema, seed"""
    from scripthub.services.catalog_service import CatalogService

    ensure_database_directory(database.db_file)
    if legacy_file:
        migrate_legacy_database(legacy_file, database.db_file)

    with database.connection() as conn:
        init_database_schema(conn)

    catalog = CatalogService(database)
    seeded = catalog.seed_default_categories(default_categories or [])
    return catalog, seeded
