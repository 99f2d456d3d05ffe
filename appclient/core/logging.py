"""Logging utilities for appclient modules."""

import logging
from typing import Dict, Iterable, Mapping

# Header values that must never reach a log record
SECRET_HEADERS = frozenset({'x-appwrite-key', 'x-appwrite-jwt'})


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits from the root logger.
    
    Loggers work with basicConfig() without an explicit setup_logging()
    call: they propagate to the root logger and only get a WARNING
    default while the root logger has no handlers.
    
    Args:
        name: Logger name (typically 'appclient.<area>')
        
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    
    if not logging.getLogger().handlers:
        logger.setLevel(logging.WARNING)
    
    return logger


def redact_headers(
    headers: Mapping[str, str],
    secrets: Iterable[str] = SECRET_HEADERS
) -> Dict[str, str]:
    """Copy of ``headers`` with secret values masked, for log output."""
    hidden = {name.lower() for name in secrets}
    return {
        key: ('***' if key.lower() in hidden else value)
        for key, value in headers.items()
    }
