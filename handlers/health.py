"""
handlers/health.py
------------------
Liveness and database probe endpoints.

/api/health never touches the store. /api/db opens its own short-lived
connection and reports the outcome as JSON, so a missing or broken
database never turns into an unhandled error.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

import psycopg2
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from config import DatabaseSettings
from utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Service"])

PROBE_TIMEOUT_SECONDS = 5


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def probe_database(
    settings: Optional[DatabaseSettings],
    connect: Optional[Callable] = None,
) -> tuple[int, dict]:
    """
    Run ``SELECT 1`` against the configured database.

    Args:
        settings: Database settings, or None when DB_* variables are missing.
        connect: Connection factory, psycopg2.connect by default.

    Returns:
        Tuple of (HTTP status code, JSON body).
    """
    if settings is None:
        return 200, {"db": "skipped", "reason": "missing DB_* envs"}

    connect = connect or psycopg2.connect
    try:
        conn = connect(settings.dsn, connect_timeout=PROBE_TIMEOUT_SECONDS)
        try:
            with conn.cursor() as cur:
                cur.execute("SELECT 1 AS ok")
                row = cur.fetchone()
        finally:
            conn.close()
    except psycopg2.Error as e:
        logger.warning(f"Database probe failed: {e}")
        return 500, {"db": "error", "message": str(e).strip()}

    return 200, {"db": "ok", "result": {"ok": row[0]}}


@router.get("/api/health")
@router.get("/health", include_in_schema=False)
def health_check(request: Request):
    """
    Report that the server is up.

    Returns:
        dict: ``ok``, the current UTC timestamp and, when configured, the database name.
    """
    body = {"ok": True, "ts": _utc_timestamp()}
    settings = request.app.state.db_settings
    if settings is not None:
        body["db"] = settings.name
    return body


@router.get("/api/db")
@router.get("/db", include_in_schema=False)
def database_probe(request: Request):
    """Check that the database answers a trivial query."""
    status, body = probe_database(request.app.state.db_settings)
    return JSONResponse(status_code=status, content=body)


lite_router = APIRouter(tags=["Service"])


@lite_router.get("/api/health")
def lite_health_check():
    """Health route for the database-free CI app."""
    return {"ok": True}
