"""
Observability module.

Provides structured logging, correlation ID tracking and request logging.
"""

from acquirer_backend.observability.correlation import (
    get_correlation_id,
    set_correlation_id,
)
from acquirer_backend.observability.logger import (
    configure_logging,
    set_log_level,
)

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
    "set_log_level",
]
