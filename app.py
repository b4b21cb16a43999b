"""
app.py
------
Builds the FastAPI application.

Collaborators (the user service and the database settings) are passed in
and kept on ``app.state``; routes reach them through dependencies, so the
app never opens a connection of its own.
"""

from typing import Optional

import psycopg2
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import DatabaseSettings
from handlers import health, users
from services.user_service import UserService
from utils.logger import get_logger

logger = get_logger(__name__)

TITLE = "User Form Service"
VERSION = "1.0.0"


async def _store_error_handler(request: Request, exc: psycopg2.Error) -> JSONResponse:
    message = str(exc).strip()
    logger.error(f"{request.method} {request.url.path} failed: {message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": message},
    )


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Unreadable bodies share the store-error contract: 500 with an error message.
    messages = [e.get("msg", "invalid request") for e in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "; ".join(messages) or "invalid request"},
    )


def _add_cors(app: FastAPI) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )


def create_app(
    user_service: UserService,
    db_settings: Optional[DatabaseSettings] = None,
) -> FastAPI:
    """
    Create the full application.

    Args:
        user_service: Service bound to the connection opened at startup.
        db_settings: Settings used by the /api/db probe and reported by /api/health.

    Returns:
        FastAPI app serving health, probe, list and create routes.
    """
    app = FastAPI(title=TITLE, version=VERSION)
    app.state.user_service = user_service
    app.state.db_settings = db_settings

    _add_cors(app)
    app.add_exception_handler(psycopg2.Error, _store_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.include_router(health.router)
    app.include_router(users.router)
    return app


def create_lite_app() -> FastAPI:
    """Create the database-free app exposing only ``GET /api/health``."""
    app = FastAPI(title=f"{TITLE} (lite)", version=VERSION)
    app.include_router(health.lite_router)
    return app
