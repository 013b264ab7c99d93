"""
Logger factory and small logging helpers.

Provides:
- get_logger(): Get a configured logger instance
- hash_ip(): Hash IP addresses for privacy
- log_with_context(): Bind request-scoped context to a logger
"""

from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from shared.logging_config import hash_ip as _hash_ip, setup_logging


def get_logger(name: str) -> BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Example:
        >>> log = get_logger(__name__)
        >>> log.info("turnstile_verified", ip_hash=hash_ip("1.2.3.4"))
    """
    return structlog.get_logger(name)


def hash_ip(ip_address: Optional[str]) -> Optional[str]:
    """Hash an IP for logging; None passes through untouched."""
    if ip_address is None:
        return None
    return _hash_ip(ip_address)


def log_with_context(logger: BoundLogger, **context) -> BoundLogger:
    """
    Bind context to a logger for all subsequent log calls.

    Example:
        >>> log = log_with_context(get_logger(__name__), control="Turnstile")
        >>> log.info("verification_shown")  # Will include control
    """
    return logger.bind(**context)


__all__ = [
    "get_logger",
    "hash_ip",
    "log_with_context",
    "setup_logging",
]
