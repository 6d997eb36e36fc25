"""
Configuration settings for throwawaydb.

Uses Pydantic Settings to load the server connection, default name prefix and
logging options from environment variables or a `.env` file. Only the opt-in
helpers (`ThrowawayDatabase.from_settings`, `throwaway_database()` without an
explicit connection, and the pytest fixture) read these values; passing a
connection explicitly never touches the environment.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from throwawaydb.domain.models import MAINTENANCE_DATABASE, ConnectionDescriptor

DEFAULT_DATABASE_NAME_PREFIX = "throwawaydb"


class Settings(BaseSettings):
    # Server
    db_dsn: Optional[str] = Field(None, alias="THROWAWAYDB_DSN")
    db_host: str = Field("localhost", alias="THROWAWAYDB_HOST")
    db_port: int = Field(5432, alias="THROWAWAYDB_PORT")
    db_user: str = Field("postgres", alias="THROWAWAYDB_USER")
    db_password: str = Field("postgres", alias="THROWAWAYDB_PASSWORD")

    # Provisioning
    name_prefix: str = Field(DEFAULT_DATABASE_NAME_PREFIX, alias="THROWAWAYDB_PREFIX")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def descriptor(self) -> ConnectionDescriptor:
        """
        Server-level descriptor built from these settings.

        `db_dsn` wins over the individual fields when set.
        """
        if self.db_dsn:
            return ConnectionDescriptor.from_conninfo(self.db_dsn)
        return ConnectionDescriptor.from_credentials(
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            dbname=MAINTENANCE_DATABASE,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DEFAULT_DATABASE_NAME_PREFIX", "Settings", "get_settings"]
