"""
Domain models for throwawaydb.

`ConnectionDescriptor` is the structured form of a libpq connection string. It
is parsed from and rendered back to conninfo strings with psycopg's own
`psycopg.conninfo` helpers, so any keyword libpq understands survives the round
trip through the `options` mapping.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from psycopg.conninfo import conninfo_to_dict, make_conninfo
from pydantic import BaseModel, Field

DEFAULT_DATABASE_PORT = 5432
MAINTENANCE_DATABASE = "postgres"
REDACTED_PASSWORD = "***"

_STRUCTURED_KEYS = ("host", "port", "user", "password", "dbname")


class ConnectionDescriptor(BaseModel):
    """
    Connection parameters for a single PostgreSQL target database.
    """

    host: Optional[str] = Field(None, description="Server host or socket directory; libpq default if unset.")
    port: Optional[int] = Field(None, description="Server TCP port; libpq default when unset.")
    user: Optional[str] = Field(None, description="Role to authenticate as.")
    password: Optional[str] = Field(None, description="Password for `user`.")
    dbname: Optional[str] = Field(None, description="Target database name.")
    options: Dict[str, str] = Field(
        default_factory=dict,
        description="Any further libpq keywords (sslmode, connect_timeout, ...).",
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    @classmethod
    def from_conninfo(cls, conninfo: str) -> "ConnectionDescriptor":
        """
        Parse a keyword/value conninfo string or a ``postgresql://`` URI.

        Keywords the string leaves out stay unset, so libpq applies its own
        defaults (Unix socket, PGHOST, PGPORT, ...) when connecting. A port that
        is not a single integer, such as a multi-host ``5432,5433`` list, is kept
        verbatim in `options`.

        Raises
        ------
        psycopg.ProgrammingError
            If libpq cannot parse the string at all.
        """
        params: Dict[str, Any] = dict(conninfo_to_dict(conninfo))
        fields: Dict[str, Any] = {}
        for key in _STRUCTURED_KEYS:
            value = params.pop(key, None)
            if value is not None:
                fields[key] = value
        port = fields.pop("port", None)
        if port is not None:
            if str(port).isdigit():
                fields["port"] = int(port)
            else:
                params["port"] = port
        fields["options"] = {key: str(value) for key, value in params.items()}
        return cls(**fields)

    @classmethod
    def from_credentials(
        cls,
        username: str,
        password: str,
        host: str,
        port: int = DEFAULT_DATABASE_PORT,
        dbname: str = MAINTENANCE_DATABASE,
    ) -> "ConnectionDescriptor":
        """Build a server-level descriptor from individual credentials."""
        return cls(host=host, port=port, user=username, password=password, dbname=dbname)

    def with_database(self, dbname: str) -> "ConnectionDescriptor":
        """Return a copy pointing at `dbname`; every other parameter is kept."""
        return self.model_copy(update={"dbname": dbname})

    def to_conninfo(self) -> str:
        """Render as a libpq keyword/value string."""
        return self._render(self.password)

    def redacted(self) -> str:
        """Render as a conninfo string with the password masked."""
        return self._render(REDACTED_PASSWORD if self.password is not None else None)

    def _render(self, password: Optional[str]) -> str:
        params: Dict[str, Any] = dict(self.options)
        structured = {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "password": password,
            "dbname": self.dbname,
        }
        params.update({key: value for key, value in structured.items() if value is not None})
        return make_conninfo(**params)

    def __str__(self) -> str:
        return self.redacted()


__all__ = [
    "ConnectionDescriptor",
    "DEFAULT_DATABASE_PORT",
    "MAINTENANCE_DATABASE",
]
