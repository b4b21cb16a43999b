"""
services/user_service.py
-------------------------
Business logic for the user form.
Turns the raw JSON body into a User and hands it to the repository.
"""

from typing import Any

from models.user import User
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def coerce_age(value: Any) -> Any:
    """
    Coerce an incoming age to an integer where possible.

    Forms send numbers as strings, so "30" and " 30 " become 30, as does 30.0.
    Anything else (booleans, "abc", "30.5", None) is returned unchanged and
    left for PostgreSQL to reject against the INTEGER column.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return value
    return value


class UserService:
    """Creates and lists users on top of a UserRepository."""

    def __init__(self, repo: UserRepository):
        self.repo = repo

    def create_from_payload(self, payload: Any) -> User:
        """
        Build a User from a JSON body and persist it.

        Missing fields are passed on as None so the NOT NULL constraints
        reject them; no validation happens here beyond the age coercion.

        Args:
            payload: Decoded JSON body, normally an object with name, email and age.

        Returns:
            The stored User with its id.

        Raises:
            psycopg2.Error: If the store rejects the insert.
        """
        if not isinstance(payload, dict):
            payload = {}

        user = User(
            name=payload.get("name"),
            email=payload.get("email"),
            age=coerce_age(payload.get("age")),
        )
        created = self.repo.create(user)
        logger.info(f"Created user {created.id} ({created.email}).")
        return created

    def list_users(self) -> list[User]:
        """Return all users, newest first."""
        return self.repo.list_all()
