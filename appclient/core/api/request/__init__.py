"""Request pipeline: build, execute, interpret."""
from .models import FilePart, RawResponse, RequestSpec
from .request_builder import RequestBuilder, MULTIPART_FORM, stringify
from .request_handler import HttpTransport, AiohttpTransport
from .response_handler import ResponseHandler

__all__ = [
    'FilePart',
    'RawResponse',
    'RequestSpec',
    'RequestBuilder',
    'MULTIPART_FORM',
    'stringify',
    'HttpTransport',
    'AiohttpTransport',
    'ResponseHandler',
]
