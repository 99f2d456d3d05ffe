"""API plumbing: configuration, request pipeline and the async client."""
from .config import ClientConfig, SSLConfig, TimeoutConfig, DEFAULT_CHUNK_SIZE, DEFAULT_ENDPOINT
from .async_client import AsyncAPIClient, RESPONSE_FORMAT
from .json_codec import JsonCodec
from .types import JsonMap, JsonValue, Converter
from .request import (
    AiohttpTransport,
    FilePart,
    HttpTransport,
    MULTIPART_FORM,
    RawResponse,
    RequestBuilder,
    RequestSpec,
    ResponseHandler,
)

__all__ = [
    'ClientConfig',
    'SSLConfig',
    'TimeoutConfig',
    'DEFAULT_CHUNK_SIZE',
    'DEFAULT_ENDPOINT',
    'AsyncAPIClient',
    'RESPONSE_FORMAT',
    'JsonCodec',
    'JsonMap',
    'JsonValue',
    'Converter',
    'AiohttpTransport',
    'FilePart',
    'HttpTransport',
    'MULTIPART_FORM',
    'RawResponse',
    'RequestBuilder',
    'RequestSpec',
    'ResponseHandler',
]
