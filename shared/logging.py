"""
Logging utilities, framework-agnostic re-exports.

Infrastructure, services and providers import from here so that none of them
depends on where the structlog configuration actually lives.
"""

from utils.logger import get_logger, log_with_context, mask_address
from utils.logging_config import configure_structlog, setup_logging

__all__ = [
    "get_logger",
    "log_with_context",
    "mask_address",
    "configure_structlog",
    "setup_logging",
]
