"""
Logging utilities for safe structured logging.

Chunk contents and service responses can be large; every context value is
stringified and truncated before it reaches a handler.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Safely convert any value to a string for logging.

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


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with structured context, safely converting all values.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Arbitrary key-value pairs attached as record attributes
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    logger.log(level, message, extra=safe_context)


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log a caught exception with its type, message and context.

    Logged at ERROR with the traceback attached; the caller decides whether
    to re-raise.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    safe_context.update({
        "error_type": type(exc).__name__,
        "error_msg": safe_log_value(str(exc)),
    })
    logger.error(
        f"{message} - {type(exc).__name__}: {safe_log_value(str(exc))}",
        exc_info=(type(exc), exc, exc.__traceback__),
        extra=safe_context,
    )
