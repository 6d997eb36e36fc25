"""
Pytest configuration for throwawaydb.

Provides fixtures for:
- Settings for integration tests (from THROWAWAYDB_* environment variables)
- A fake `psycopg.connect` that records statements and injects failures
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import psycopg
import pytest
from psycopg import sql

from throwawaydb.config import Settings, get_settings


def render(query: Any) -> str:
    """Render a query (plain string or psycopg.sql composition) as text."""
    if isinstance(query, sql.Composable):
        return query.as_string(None)
    return str(query)


@dataclass
class ExecutedStatement:
    conninfo: str
    autocommit: bool
    query: str
    params: Optional[Tuple[Any, ...]]


@dataclass
class FakeServer:
    """
    In-memory stand-in for a PostgreSQL server reached through psycopg.connect.

    `refuse_connections` makes every connect fail; `fail_on` maps a statement
    prefix (e.g. "CREATE DATABASE") to the error raised when it executes.
    """

    refuse_connections: bool = False
    fail_on: Dict[str, Exception] = field(default_factory=dict)
    connections: List[str] = field(default_factory=list)
    statements: List[ExecutedStatement] = field(default_factory=list)
    closed: int = 0

    def queries(self) -> List[str]:
        return [statement.query for statement in self.statements]

    def connect(self, conninfo: str = "", autocommit: bool = False, **kwargs: Any) -> "_FakeConnection":
        self.connections.append(conninfo)
        if self.refuse_connections:
            raise psycopg.OperationalError("connection refused")
        return _FakeConnection(self, conninfo, autocommit)


class _FakeCursor:
    def __init__(self, connection: "_FakeConnection") -> None:
        self._connection = connection

    def execute(self, query: Any, params: Optional[Tuple[Any, ...]] = None) -> "_FakeCursor":
        self._connection.run(query, params)
        return self

    def fetchone(self) -> Tuple[int]:
        return (1,)

    def __enter__(self) -> "_FakeCursor":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        return None


class _FakeConnection:
    def __init__(self, server: FakeServer, conninfo: str, autocommit: bool) -> None:
        self._server = server
        self._conninfo = conninfo
        self._autocommit = autocommit

    def run(self, query: Any, params: Optional[Tuple[Any, ...]]) -> None:
        text = render(query)
        self._server.statements.append(ExecutedStatement(self._conninfo, self._autocommit, text, params))
        for prefix, error in self._server.fail_on.items():
            if text.startswith(prefix):
                raise error

    def execute(self, query: Any, params: Optional[Tuple[Any, ...]] = None) -> _FakeCursor:
        return self.cursor().execute(query, params)

    def cursor(self) -> _FakeCursor:
        return _FakeCursor(self)

    def close(self) -> None:
        self._server.closed += 1

    def __enter__(self) -> "_FakeConnection":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


@pytest.fixture
def fake_server(monkeypatch: pytest.MonkeyPatch) -> FakeServer:
    """Route every psycopg.connect made by throwawaydb to an in-memory server."""
    server = FakeServer()
    monkeypatch.setattr("throwawaydb.infrastructure.db_factory.psycopg.connect", server.connect)
    return server


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture for integration tests.

    Can be overridden via environment variables in CI or local testing.
    """
    return Settings(
        db_host=os.getenv("THROWAWAYDB_HOST", "localhost"),
        db_port=int(os.getenv("THROWAWAYDB_PORT", "5432")),
        db_user=os.getenv("THROWAWAYDB_USER", "postgres"),
        db_password=os.getenv("THROWAWAYDB_PASSWORD", "postgres"),
        log_level="DEBUG",
    )
