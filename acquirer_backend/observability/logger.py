"""
Logger configuration.

Provides configured logger with ISO timestamps and correlation ID injection,
plus runtime log level switching for the trace-level endpoint.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

from acquirer_backend.observability.correlation import CorrelationIdFilter

LOG_LEVELS: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


class InvalidLogLevelError(ValueError):
    """Raised when an unknown log level name is requested."""


def configure_logging(level: str = "INFO") -> None:
    """
    Configure Python logging with ISO timestamp and structured format.

    Args:
        level: Initial root log level name
    """
    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.addFilter(CorrelationIdFilter())

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root_logger.setLevel(LOG_LEVELS.get(level.lower(), logging.INFO))
    root_logger.addHandler(handler)

    # Reduce noise from verbose third-party libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("boto3").setLevel(logging.WARNING)


def set_log_level(level: str) -> int:
    """
    Change the root log level at runtime.

    Args:
        level: Level name, case-insensitive (critical, error, warning, warn, info, debug)

    Returns:
        int: Numeric level that was applied

    Raises:
        InvalidLogLevelError: If the level name is unknown
    """
    numeric = LOG_LEVELS.get((level or "").lower())
    if numeric is None:
        raise InvalidLogLevelError(f"Invalid log level: {level}")

    logging.getLogger().setLevel(numeric)
    return numeric
