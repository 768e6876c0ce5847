"""
Logger factory and helpers for the stamp provider service.

Provides:
- get_logger(): Get a configured logger instance
- log_with_context(): Bind request-scoped fields to a logger
- mask_address(): Shorten wallet addresses for log lines
"""

from typing import Optional

import structlog
from structlog.stdlib import BoundLogger


def get_logger(name: str) -> BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Configured structlog BoundLogger instance

    Example:
        >>> from shared.logging import get_logger
        >>> log = get_logger(__name__)
        >>> log.info("provider_verified", provider="ETHScore#50", valid=True)
    """
    return structlog.get_logger(name)


def log_with_context(logger: BoundLogger, **context) -> BoundLogger:
    """
    Bind context to a logger for all subsequent log calls.

    Example:
        >>> log = log_with_context(get_logger(__name__), address=mask_address(addr))
        >>> log.info("eth_analysis_fetched")  # includes address
    """
    return logger.bind(**context)


def mask_address(address: Optional[str]) -> Optional[str]:
    """
    Shorten a wallet address to its head and tail, e.g. ``0x1234...abcd``.

    Addresses shorter than 12 characters are returned unchanged.
    """
    if address is None or len(address) < 12:
        return address
    return f"{address[:6]}...{address[-4:]}"
