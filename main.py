"""
main.py
-------
Entry point for the user form backend.

Responsibilities:
    - Connect to PostgreSQL, retrying a bounded number of times.
    - Create the schema before any request is accepted.
    - Build the FastAPI app around the connection and serve it with uvicorn.
"""

import uvicorn

from app import create_app
from config import (
    DATABASE,
    DB_CONNECT_ATTEMPTS,
    DB_CONNECT_DELAY_SECONDS,
    DB_CONNECT_TIMEOUT_SECONDS,
    HOST,
    PORT,
)
from db.connection import close_connection, connect_with_retry
from db.init_db import create_tables
from repositories.user_repo import UserRepository
from services.user_service import UserService
from utils.logger import get_logger

logger = get_logger(__name__)


def bootstrap(
    settings=DATABASE,
    attempts=DB_CONNECT_ATTEMPTS,
    delay=DB_CONNECT_DELAY_SECONDS,
    timeout=DB_CONNECT_TIMEOUT_SECONDS,
):
    """
    Open the database connection and create the schema.

    Returns:
        The ready connection.

    Raises:
        SystemExit: With status 1 if settings are missing, the database
            stays unreachable after all attempts, or schema creation fails.
    """
    if settings is None:
        logger.critical("Missing DB_HOST / DB_USER / DB_NAME; cannot start.")
        raise SystemExit(1)

    result = connect_with_retry(
        settings.dsn, attempts=attempts, delay=delay, timeout=timeout
    )
    if not result.ok:
        logger.critical(
            f"Could not connect to database after {result.attempts} attempt(s): {result.error}"
        )
        raise SystemExit(1)

    conn = result.connection
    try:
        create_tables(conn)
    except Exception:
        close_connection(conn)
        logger.critical("Schema initialization failed; cannot start.")
        raise SystemExit(1)
    return conn


def main() -> None:
    """Bootstrap the database and run the HTTP server."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    conn = bootstrap()

    # ── 2. Build the application ──────────────────────────
    service = UserService(UserRepository(conn))
    app = create_app(service, DATABASE)

    # ── 3. Serve ──────────────────────────────────────────
    logger.info(f"Backend listening on http://127.0.0.1:{PORT}")
    try:
        uvicorn.run(app, host=HOST, port=PORT, log_config=None)
    finally:
        close_connection(conn)
        logger.info("Backend stopped.")


if __name__ == "__main__":
    main()
