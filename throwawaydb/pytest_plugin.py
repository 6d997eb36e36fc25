"""
pytest plugin exposing a `throwaway_database` fixture.

Registered through the ``pytest11`` entry point, so installing the package is
enough. The server comes from `throwawaydb.config.Settings` (``THROWAWAYDB_*``
environment variables or `.env`); tests requesting the fixture are skipped
when that server is unreachable.
"""

from __future__ import annotations

from typing import Generator

import pytest

from throwawaydb.errors import ConnectivityError
from throwawaydb.provisioner import ThrowawayDatabase


@pytest.fixture
def throwaway_database() -> Generator[ThrowawayDatabase, None, None]:
    """A freshly created empty database, dropped after the test."""
    try:
        database = ThrowawayDatabase.from_settings()
    except ConnectivityError as exc:
        pytest.skip(f"PostgreSQL server not available for throwaway databases: {exc}")
    with database:
        yield database
