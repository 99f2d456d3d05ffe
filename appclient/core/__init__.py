"""Core building blocks: API plumbing, uploads, logging and errors."""
from .exceptions import ApiError, AppClientException, DecodeError, TransportError
from .logging import get_logger, redact_headers

__all__ = [
    'ApiError',
    'AppClientException',
    'DecodeError',
    'TransportError',
    'get_logger',
    'redact_headers',
]
