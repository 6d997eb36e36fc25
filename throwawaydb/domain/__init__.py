"""
Domain package for throwawaydb.

Exports the connection descriptor model shared by the provisioner, the
connection factory and the settings layer.
"""

from throwawaydb.domain.models import (
    DEFAULT_DATABASE_PORT,
    MAINTENANCE_DATABASE,
    ConnectionDescriptor,
)

__all__ = [
    "ConnectionDescriptor",
    "DEFAULT_DATABASE_PORT",
    "MAINTENANCE_DATABASE",
]
