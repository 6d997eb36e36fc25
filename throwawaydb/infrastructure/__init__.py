"""
Infrastructure package for throwawaydb.

Centralizes database connectivity. Keep this layer focused on I/O and resource
management, decoupled from provisioning logic.
"""

from throwawaydb.infrastructure.db_factory import open_connection, ping

__all__ = [
    "open_connection",
    "ping",
]
