"""
Logging utilities for the Headline Analyzer backend.

Provides standardized logger configuration following security rules.

CRITICAL SECURITY RULES:
- NEVER log the OpenAI API key or the Authorization header
- NEVER return upstream error details to clients (log them here instead)

Acceptable logging:
- High-level events (e.g., "POST /api/analyze called", "Completion received")
- Truncated user input (e.g., "headline='10 Ways to...'")
- Raw model replies at DEBUG level only
- Error classes and sanitized error messages
"""

import logging
from typing import Optional, Union

from headline_backend.config import settings


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to settings.LOG_LEVEL)

    Returns:
        Configured logger instance

    Usage:
        >>> from headline_backend.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = settings.LOG_LEVEL.upper()

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def truncate_for_log(value: str, limit: int = 50) -> str:
    """Shorten user-supplied text before it goes into a log line."""
    if len(value) <= limit:
        return value
    return value[:limit] + "..."
