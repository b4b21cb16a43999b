"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

import sys

from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users table: one row per submitted form
CREATE TABLE IF NOT EXISTS users (
    id      SERIAL PRIMARY KEY,
    name    TEXT NOT NULL,
    email   TEXT NOT NULL UNIQUE,
    age     INTEGER NOT NULL CHECK (age >= 0)
);
"""


def create_tables(conn) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).

    Args:
        conn: An open psycopg2 connection.
    """
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        if not conn.autocommit:
            conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        if not conn.autocommit:
            conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    from config import DATABASE
    from db.connection import close_connection, connect_with_retry

    if DATABASE is None:
        sys.exit("Missing DB_HOST / DB_USER / DB_NAME.")
    result = connect_with_retry(DATABASE.dsn)
    if not result.ok:
        sys.exit(f"Could not connect to database: {result.error}")
    create_tables(result.connection)
    close_connection(result.connection)
    print("Database schema created successfully.")
