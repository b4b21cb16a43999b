"""
db/connection.py
----------------
Opens the single PostgreSQL connection shared by all request handlers.
The bootstrap retries a fixed number of times with a fixed delay and
reports the outcome as a ConnectResult; exiting is left to the caller.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

import psycopg2
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_fixed

from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_ATTEMPTS = 10
DEFAULT_DELAY_SECONDS = 3.0
DEFAULT_CONNECT_TIMEOUT_SECONDS = 5


@dataclass
class ConnectResult:
    """
    Outcome of a bootstrap attempt.

    Attributes:
        connection: The open connection, or None on failure.
        error: The last error raised, or None on success.
        attempts: How many connection attempts were made.
    """
    connection: Optional[Any] = None
    error: Optional[Exception] = None
    attempts: int = 0

    @property
    def ok(self) -> bool:
        return self.connection is not None


def connect_with_retry(
    dsn: str,
    attempts: int = DEFAULT_ATTEMPTS,
    delay: float = DEFAULT_DELAY_SECONDS,
    connect: Callable[..., Any] = psycopg2.connect,
    timeout: int = DEFAULT_CONNECT_TIMEOUT_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> ConnectResult:
    """
    Try to connect to the database, retrying on OperationalError.

    Args:
        dsn: libpq connection string.
        attempts: Maximum number of connection attempts.
        delay: Seconds to wait between attempts.
        connect: Connection factory, psycopg2.connect by default.
        timeout: Per-attempt connect_timeout passed to libpq, in seconds.
        sleep: Function used to wait between attempts.

    Returns:
        ConnectResult holding either an autocommit connection or the last error.
    """
    made = 0

    def _attempt():
        nonlocal made
        made += 1
        return connect(dsn, connect_timeout=timeout)

    def _log_failure(retry_state) -> None:
        exc = retry_state.outcome.exception()
        logger.warning(
            f"Database connection attempt {retry_state.attempt_number}/{attempts} failed: {exc}"
        )

    retryer = Retrying(
        retry=retry_if_exception_type(psycopg2.OperationalError),
        stop=stop_after_attempt(attempts),
        wait=wait_fixed(delay),
        after=_log_failure,
        sleep=sleep,
        reraise=True,
    )

    try:
        conn = retryer(_attempt)
    except psycopg2.Error as e:
        return ConnectResult(error=e, attempts=made)

    # Each statement commits on its own; a failed insert never leaves the
    # shared connection stuck in an aborted transaction.
    conn.autocommit = True
    logger.info(f"Connected to database after {made} attempt(s).")
    return ConnectResult(connection=conn, attempts=made)


def close_connection(conn) -> None:
    """Close the shared connection if it is still open."""
    if conn is not None and not conn.closed:
        conn.close()
        logger.info("Database connection closed.")
