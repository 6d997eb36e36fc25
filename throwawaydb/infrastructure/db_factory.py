"""
Database connection factory for throwawaydb.

Every provisioning step opens its own short-lived psycopg connection and closes
it when the step finishes. No connection is ever held between steps.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

import psycopg
from psycopg import Connection

from throwawaydb.domain.models import ConnectionDescriptor


@contextmanager
def open_connection(
    descriptor: ConnectionDescriptor,
    autocommit: bool = False,
) -> Generator[Connection, None, None]:
    """
    Open a dedicated synchronous connection for `descriptor`.

    The connection is closed on every exit path, including errors raised by
    the body of the ``with`` block.

    Parameters
    ----------
    descriptor : ConnectionDescriptor
        Where to connect.
    autocommit : bool
        Required for statements that cannot run in a transaction block, such as
        ``CREATE DATABASE`` and ``DROP DATABASE``.

    Example
    -------
        with open_connection(descriptor, autocommit=True) as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1")
    """
    with psycopg.connect(descriptor.to_conninfo(), autocommit=autocommit) as conn:
        yield conn


def ping(descriptor: ConnectionDescriptor) -> None:
    """
    Execute a trivial round-trip query against `descriptor`.

    Raises
    ------
    psycopg.Error
        If the connection or the query fails.
    """
    with open_connection(descriptor) as conn:
        with conn.cursor() as cur:
            cur.execute("SELECT 1")
            cur.fetchone()


__all__ = ["open_connection", "ping"]
