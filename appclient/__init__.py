"""
appclient - Async Python client for the Appwrite-style REST API.

Usage:
    >>> from appclient import Client
    >>> 
    >>> async with Client('https://cloud.example.com/v1') as client:
    ...     client.set_project('my-project').set_key('secret')
    ...     files = await client.storage.list_files('photos')
"""
import logging

from ._version import __version__
from .client import Client
from .core.api import (
    AsyncAPIClient,
    ClientConfig,
    SSLConfig,
    TimeoutConfig,
    HttpTransport,
    AiohttpTransport,
)
from .core.exceptions import ApiError, AppClientException, DecodeError, TransportError
from .core.upload import InputFile, UploadProgress
from .models import File, FileList


def setup_logging(level=logging.INFO):
    """
    Configure logging for appclient modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'appclient',
        'appclient.api',
        'appclient.api.transport',
        'appclient.upload',
        'appclient.upload.file',
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'Client',
    'AsyncAPIClient',
    'ClientConfig',
    'SSLConfig',
    'TimeoutConfig',
    'HttpTransport',
    'AiohttpTransport',
    'ApiError',
    'AppClientException',
    'DecodeError',
    'TransportError',
    'InputFile',
    'UploadProgress',
    'File',
    'FileList',
    'setup_logging',
    '__version__',
]
