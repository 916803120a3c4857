"""
Logging helpers for degraded-mode operations.

Storage and enrichment steps that must never fail a chat request log their
errors through these helpers instead of raising.

Dependencies: logging (stdlib)
System role: Structured logging for swallowed errors
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

MAX_VALUE_LENGTH = 200


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Render a value for a log record's `extra`.

    Collections are summarized by size; long strings are cut to
    `max_length` characters.
    """
    if value is None:
        return "None"
    if isinstance(value, Mapping):
        return f"dict({len(value)} keys)"
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return f"{type(value).__name__}({len(value)} items)"

    text = str(value)
    if len(text) > max_length:
        return f"{text[:max_length]}... ({len(text)} chars)"
    return text


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    level: int = logging.ERROR,
    **context: Any,
) -> None:
    """
    Log a handled exception with its traceback and identifying context.

    Args:
        logger: Module logger
        message: Log message
        exc: The exception being swallowed
        level: Log level (ERROR by default)
        **context: Identifiers such as session_id or session_key
    """
    extra = {key: safe_log_value(value) for key, value in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(exc)
    logger.log(level, message, exc_info=exc, extra=extra)
