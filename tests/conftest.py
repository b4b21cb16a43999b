"""
Shared pytest fixtures.

The HTTP tests run against an in-memory repository that mimics the
constraints PostgreSQL enforces on the users table, raising the same
psycopg2 error classes a real server would.
"""
import psycopg2.errors
import pytest
from fastapi.testclient import TestClient

from app import create_app, create_lite_app
from config import DatabaseSettings
from models.user import User
from services.user_service import UserService


class InMemoryUserRepository:
    """Stand-in for UserRepository backed by a list."""

    def __init__(self):
        self.rows = []
        self._next_id = 1

    def create(self, user):
        for column in ("name", "email", "age"):
            if getattr(user, column) is None:
                raise psycopg2.errors.NotNullViolation(
                    f'null value in column "{column}" of relation "users" violates not-null constraint'
                )
        if isinstance(user.age, bool) or not isinstance(user.age, int):
            raise psycopg2.errors.InvalidTextRepresentation(
                f'invalid input syntax for type integer: "{user.age}"'
            )
        if any(r.email == user.email for r in self.rows):
            raise psycopg2.errors.UniqueViolation(
                'duplicate key value violates unique constraint "users_email_key"'
            )
        if user.age < 0:
            raise psycopg2.errors.CheckViolation(
                'new row for relation "users" violates check constraint "users_age_check"'
            )
        stored = User(id=self._next_id, name=user.name, email=user.email, age=user.age)
        self._next_id += 1
        self.rows.append(stored)
        return stored

    def list_all(self):
        return sorted(self.rows, key=lambda u: u.id, reverse=True)


class BrokenUserRepository:
    """Repository whose every call fails as if the database went away."""

    def create(self, user):
        raise psycopg2.OperationalError("server closed the connection unexpectedly")

    def list_all(self):
        raise psycopg2.OperationalError("server closed the connection unexpectedly")


@pytest.fixture
def db_settings():
    return DatabaseSettings(
        host="db.internal", port=5432, user="app", password="secret", name="forms"
    )


@pytest.fixture
def repo():
    return InMemoryUserRepository()


@pytest.fixture
def client(repo, db_settings):
    return TestClient(create_app(UserService(repo), db_settings))


@pytest.fixture
def broken_client(db_settings):
    return TestClient(create_app(UserService(BrokenUserRepository()), db_settings))


@pytest.fixture
def lite_client():
    return TestClient(create_lite_app())
