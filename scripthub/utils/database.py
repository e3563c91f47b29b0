"""
Database utilities and helpers
"""

import sqlite3
import logging
from contextlib import contextmanager

logger = logging.getLogger(__name__)


class Database:
    """Handle on the SQLite file shared by every request in the process"""

    def __init__(self, db_file):
        self.db_file = str(db_file)

    def __repr__(self):
        return f"Database({self.db_file!r})"

    def get_connection(self):
        """Get database connection with optimized settings"""
        logger.debug(f"[DB] Connecting to database: {self.db_file}")
        conn = sqlite3.connect(self.db_file, timeout=10, check_same_thread=False)
        conn.row_factory = sqlite3.Row

        # WAL lets readers proceed while a writer holds the lock
        conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA synchronous=NORMAL")
        conn.execute("PRAGMA cache_size=10000")
        conn.execute("PRAGMA temp_store=MEMORY")

        logger.debug("[DB] Database connection established")
        return conn

    @contextmanager
    def connection(self):
        """Yield a connection, commit on success, roll back on error, always close"""
        conn = self.get_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def execute(self, query, params=None):
        """Execute a write query, return (rowcount, lastrowid)"""
        try:
            with self.connection() as conn:
                cursor = conn.execute(query, params or ())
                return cursor.rowcount, cursor.lastrowid
        except sqlite3.IntegrityError as e:
            logger.warning(f"[DB] Constraint violated: {e}")
            raise
        except sqlite3.Error as e:
            logger.error(f"[DB] Error executing query: {e}")
            raise

    def fetchone(self, query, params=None):
        """Fetch one row from database as a dict, or None"""
        try:
            with self.connection() as conn:
                row = conn.execute(query, params or ()).fetchone()
                return dict(row) if row is not None else None
        except sqlite3.Error as e:
            logger.error(f"[DB] Error fetching one: {e}")
            raise

    def fetchall(self, query, params=None):
        """Fetch all rows from database as dicts"""
        try:
            with self.connection() as conn:
                return [dict(row) for row in conn.execute(query, params or ()).fetchall()]
        except sqlite3.Error as e:
            logger.error(f"[DB] Error fetching all: {e}")
            raise

    def transaction(self, queries):
        """Execute multiple (query, params) pairs in one transaction"""
        try:
            with self.connection() as conn:
                for query, params in queries:
                    conn.execute(query, params or ())
            return True
        except sqlite3.Error as e:
            logger.error(f"[DB] Transaction error: {e}")
            raise
