"""Exceptions raised while provisioning or tearing down a throwaway database."""

from __future__ import annotations


class ThrowawayDatabaseError(RuntimeError):
    """Base class for every throwawaydb failure."""


class ConnectivityError(ThrowawayDatabaseError):
    """Raised when the server cannot be reached or authenticated against."""

    def __init__(self, descriptor: str, cause: BaseException) -> None:
        self.descriptor = descriptor
        self.cause = cause
        super().__init__(f"Could not connect to the PostgreSQL server at '{descriptor}': {cause}")


class ProvisioningError(ThrowawayDatabaseError):
    """Raised when the server is reachable but the database could not be created."""

    def __init__(self, database_name: str, cause: BaseException) -> None:
        self.database_name = database_name
        self.cause = cause
        super().__init__(f"Could not create the throwaway database '{database_name}': {cause}")


class TeardownError(ThrowawayDatabaseError):
    """Raised when a created database could not be fully dropped.

    The database may still exist on the server afterwards.
    """

    def __init__(self, database_name: str, cause: BaseException) -> None:
        self.database_name = database_name
        self.cause = cause
        super().__init__(
            f"Could not drop the throwaway database '{database_name}'; "
            f"it may need to be removed manually: {cause}"
        )


__all__ = [
    "ConnectivityError",
    "ProvisioningError",
    "TeardownError",
    "ThrowawayDatabaseError",
]
