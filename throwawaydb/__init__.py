"""
throwawaydb - disposable PostgreSQL databases for integration tests.

Provisions a uniquely named, empty database on an existing server, hands back a
connection string for it and drops it when the caller is done:

- `ThrowawayDatabase.create` / `create_from_credentials` / `from_settings`
- `throwaway_database()` context manager
- `throwaway_database` pytest fixture (via the bundled plugin)
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from throwawaydb.config import Settings, get_settings
from throwawaydb.domain.models import ConnectionDescriptor
from throwawaydb.errors import (
    ConnectivityError,
    ProvisioningError,
    TeardownError,
    ThrowawayDatabaseError,
)
from throwawaydb.provisioner import ThrowawayDatabase, generate_database_name, throwaway_database
from throwawaydb.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Provisioning
    "ConnectionDescriptor",
    "ThrowawayDatabase",
    "generate_database_name",
    "throwaway_database",
    # Errors
    "ThrowawayDatabaseError",
    "ConnectivityError",
    "ProvisioningError",
    "TeardownError",
    # Logging
    "configure_logging",
    "get_logger",
]
