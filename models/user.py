"""
models/user.py
--------------
Domain model for a submitted user record.
"""

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass
class User:
    """
    Represents a single row of the users table.

    Attributes:
        name: Display name.
        email: Email address, unique across all users.
        age: Non-negative age in years.
        id: Database primary key (None for new records).
    """
    name: str
    email: str
    age: int
    id: Optional[int] = None

    def to_dict(self) -> dict:
        """Serialize to the JSON shape returned by the API."""
        data = asdict(self)
        return {key: data[key] for key in ("id", "name", "email", "age")}

    def __str__(self) -> str:
        return f"#{self.id} {self.name} <{self.email}> ({self.age})"
