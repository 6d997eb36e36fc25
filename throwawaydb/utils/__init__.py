"""
Utilities package for throwawaydb.

Exports shared logging helpers. Keep this package lightweight and free of
provisioning logic.
"""

from throwawaydb.utils.logging import (
    JsonFormatter,
    RedactPasswordFilter,
    configure_logging,
    get_logger,
    redact,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "JsonFormatter",
    "RedactPasswordFilter",
    "redact",
]
