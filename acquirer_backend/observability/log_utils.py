"""
Logging utilities for safe structured logging.

Provides helpers for safe logging without string concatenation errors.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

# Keys that must never reach a log line
REDACTED_KEYS = {"password", "token", "authorization", "secret"}


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Safely convert any value to a string for logging.

    Handles lists, dicts, None, and other types safely.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            val_str = value
        elif isinstance(value, (list, tuple)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict({len(value)} keys)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def redact(payload: dict[str, Any]) -> dict[str, Any]:
    """
    Copy a payload with credential-like keys masked.

    Args:
        payload: Arbitrary request or audit payload

    Returns:
        dict: Copy safe to log or persist
    """
    return {
        key: "***" if key.lower() in REDACTED_KEYS else value
        for key, value in payload.items()
    }


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception with full context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context dict
    """
    # nested so context keys never clash with LogRecord attributes
    safe_context = {
        key: safe_log_value(val) for key, val in redact(context).items()
    }
    logger.exception(
        message,
        extra={
            "context": safe_context,
            "error_type": type(exc).__name__,
            "error_msg": str(exc),
        },
    )
