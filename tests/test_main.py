"""
Tests for the startup sequence: connect, create schema, then serve.
"""
from unittest.mock import MagicMock

import psycopg2
import pytest

import main
from config import DatabaseSettings
from db.connection import ConnectResult


@pytest.fixture
def settings():
    return DatabaseSettings(host="db", port=5432, user="app", password="", name="forms")


class TestBootstrap:
    """Tests for main.bootstrap."""

    def test_missing_settings_exit_1(self):
        """Test that absent DB_* variables stop startup with status 1."""
        with pytest.raises(SystemExit) as exc:
            main.bootstrap(settings=None)
        assert exc.value.code == 1

    def test_unreachable_store_exit_1(self, settings, monkeypatch):
        """Test that an exhausted retry budget exits 1 without creating the schema."""
        failed = ConnectResult(error=psycopg2.OperationalError("timeout"), attempts=10)
        monkeypatch.setattr(main, "connect_with_retry", lambda *a, **kw: failed)
        create_tables = MagicMock()
        monkeypatch.setattr(main, "create_tables", create_tables)

        with pytest.raises(SystemExit) as exc:
            main.bootstrap(settings=settings)

        assert exc.value.code == 1
        create_tables.assert_not_called()

    def test_passes_retry_budget(self, settings, monkeypatch):
        """Test that the configured attempts and delay reach the bootstrapper."""
        seen = {}

        def fake_connect(dsn, attempts, delay, timeout):
            seen.update(dsn=dsn, attempts=attempts, delay=delay, timeout=timeout)
            return ConnectResult(connection=MagicMock(), attempts=1)

        monkeypatch.setattr(main, "connect_with_retry", fake_connect)
        monkeypatch.setattr(main, "create_tables", MagicMock())

        main.bootstrap(settings=settings, attempts=10, delay=3, timeout=5)

        assert seen == {"dsn": settings.dsn, "attempts": 10, "delay": 3, "timeout": 5}

    def test_success_creates_schema(self, settings, monkeypatch):
        """Test that a connected store gets its schema before being returned."""
        conn = MagicMock()
        monkeypatch.setattr(
            main, "connect_with_retry", lambda *a, **kw: ConnectResult(connection=conn, attempts=1)
        )
        create_tables = MagicMock()
        monkeypatch.setattr(main, "create_tables", create_tables)

        assert main.bootstrap(settings=settings) is conn
        create_tables.assert_called_once_with(conn)

    def test_schema_failure_exit_1(self, settings, monkeypatch):
        """Test that a failing schema creation closes the connection and exits 1."""
        conn = MagicMock(closed=0)
        monkeypatch.setattr(
            main, "connect_with_retry", lambda *a, **kw: ConnectResult(connection=conn, attempts=1)
        )
        monkeypatch.setattr(
            main, "create_tables", MagicMock(side_effect=psycopg2.ProgrammingError("denied"))
        )

        with pytest.raises(SystemExit) as exc:
            main.bootstrap(settings=settings)

        assert exc.value.code == 1
        conn.close.assert_called_once()


class TestMain:
    """Tests for main.main."""

    def test_no_server_when_bootstrap_fails(self, monkeypatch):
        """Test that uvicorn never starts if the store cannot be reached."""
        def fail():
            raise SystemExit(1)

        run = MagicMock()
        monkeypatch.setattr(main, "bootstrap", fail)
        monkeypatch.setattr(main.uvicorn, "run", run)

        with pytest.raises(SystemExit):
            main.main()
        run.assert_not_called()

    def test_serves_after_bootstrap(self, monkeypatch):
        """Test that the app is served on the configured port and the connection closed after."""
        conn = MagicMock(closed=0)
        run = MagicMock()
        monkeypatch.setattr(main, "bootstrap", lambda: conn)
        monkeypatch.setattr(main.uvicorn, "run", run)

        main.main()

        run.assert_called_once()
        assert run.call_args.kwargs["port"] == main.PORT
        assert run.call_args.kwargs["host"] == main.HOST
        assert run.call_args.kwargs["log_config"] is None
        conn.close.assert_called_once()
