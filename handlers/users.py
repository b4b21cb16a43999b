"""
handlers/users.py
-----------------
Create and list endpoints for the user form.
Delegates all logic to UserService; store errors and unreadable bodies
are turned into JSON by the exception handlers registered in app.py.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status

from services.user_service import UserService

router = APIRouter(prefix="/api", tags=["Users"])


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


@router.get("/all")
def list_users(service: UserService = Depends(get_user_service)):
    """Return every user, newest first."""
    return [u.to_dict() for u in service.list_users()]


@router.post("/form", status_code=status.HTTP_201_CREATED)
def create_user(
    payload: Any = Body(None),
    service: UserService = Depends(get_user_service),
):
    """Store the submitted form and return the created user."""
    return service.create_from_payload(payload).to_dict()
