"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from psycopg2.extensions import make_dsn

load_dotenv()


# ── HTTP server ───────────────────────────────────────────
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "3000"))

# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "")
DB_USER: str = os.getenv("DB_USER", "")
DB_PASSWORD: str = os.getenv("DB_PASSWORD", "")

# ── Startup retry ─────────────────────────────────────────
DB_CONNECT_ATTEMPTS: int = int(os.getenv("DB_CONNECT_ATTEMPTS", "10"))
DB_CONNECT_DELAY_SECONDS: float = float(os.getenv("DB_CONNECT_DELAY_SECONDS", "3"))
DB_CONNECT_TIMEOUT_SECONDS: int = int(os.getenv("DB_CONNECT_TIMEOUT_SECONDS", "5"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class DatabaseSettings:
    """
    Connection parameters for the PostgreSQL store.

    Attributes:
        host: Database server hostname.
        port: Database server port.
        user: Login role.
        password: Login password (may be empty).
        name: Database name.
    """
    host: str
    port: int
    user: str
    password: str
    name: str

    @property
    def dsn(self) -> str:
        return make_dsn(
            host=self.host,
            port=self.port,
            dbname=self.name,
            user=self.user,
            password=self.password,
        )

    @classmethod
    def from_env(cls, env: Optional[dict] = None) -> Optional["DatabaseSettings"]:
        """
        Build settings from environment variables.

        Returns:
            DatabaseSettings, or None if DB_HOST, DB_USER or DB_NAME is missing.
        """
        env = os.environ if env is None else env
        host = env.get("DB_HOST", "")
        user = env.get("DB_USER", "")
        name = env.get("DB_NAME", "")
        if not host or not user or not name:
            return None
        return cls(
            host=host,
            port=int(env.get("DB_PORT", "5432")),
            user=user,
            password=env.get("DB_PASSWORD", ""),
            name=name,
        )


DATABASE: Optional[DatabaseSettings] = DatabaseSettings.from_env()
