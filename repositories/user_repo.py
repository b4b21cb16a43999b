"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for create/list operations on the users table."""

    def __init__(self, conn):
        """
        Args:
            conn: The shared psycopg2 connection, opened at startup.
        """
        self.conn = conn

    def create(self, user: User) -> User:
        """
        Insert a user and return it with its assigned id.

        Uniqueness of email and the age check are enforced by PostgreSQL;
        a violation surfaces as a psycopg2 error and no row is written.

        Args:
            user: User to insert (its id is ignored).

        Returns:
            The stored User, including the generated id.
        """
        sql = """
            INSERT INTO users (name, email, age)
            VALUES (%s, %s, %s)
            RETURNING id, name, email, age;
        """
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (user.name, user.email, user.age))
                row = cur.fetchone()
        except Exception as e:
            logger.error(f"Failed to insert user {user.email}: {e}")
            raise
        return self._row_to_user(row)

    def list_all(self) -> list[User]:
        """
        Fetch every user, most recently created first.

        Returns:
            List of User ordered by id descending.
        """
        sql = "SELECT id, name, email, age FROM users ORDER BY id DESC;"
        with self.conn.cursor() as cur:
            cur.execute(sql)
            rows = cur.fetchall()
        return [self._row_to_user(r) for r in rows]

    @staticmethod
    def _row_to_user(row) -> User:
        return User(id=row[0], name=row[1], email=row[2], age=row[3])
