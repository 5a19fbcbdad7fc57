"""
Structured Logging Utilities

Logger adapter that tags every message with key=value context, used by the
provider clients so upstream failures can be traced to a provider.
"""

from __future__ import annotations

import logging
from typing import Any


def format_context(context: dict[str, Any]) -> str:
    """Format context fields as "key=value | key=value", skipping None values."""
    parts = [f"{key}={value}" for key, value in context.items() if value is not None]
    return " | ".join(parts)


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that prefixes log messages with structured context.

    Usage:
        logger = get_structured_logger(__name__, provider="adzuna")
        logger.error("Request failed")  # "[provider=adzuna] Request failed"
    """

    def __init__(self, logger: logging.Logger, **context: Any):
        """
        Initialize structured logger adapter.

        Args:
            logger: Base logger instance
            **context: Context fields to include in all log messages
        """
        super().__init__(logger, context)

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        context_str = format_context(self.extra)
        if context_str:
            msg = f"[{context_str}] {msg}"
        return msg, kwargs


def get_structured_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    """
    Get a structured logger with context.

    Args:
        name: Logger name (typically __name__)
        **context: Context fields (e.g., provider="reed")

    Returns:
        StructuredLoggerAdapter instance
    """
    base_logger = logging.getLogger(name)
    return StructuredLoggerAdapter(base_logger, **context)
