"""
Async API client.

Owns the persistent headers and the transport, and runs one call
through build -> execute -> interpret.
"""
import logging
import threading
from typing import Any, Dict, Mapping, Optional

from ..logging import get_logger, redact_headers
from .config import ClientConfig
from .json_codec import JsonCodec
from .request import (
    AiohttpTransport,
    HttpTransport,
    RequestBuilder,
    RequestSpec,
    ResponseHandler,
)
from .types import Converter

RESPONSE_FORMAT = '0.13.0'


class AsyncAPIClient:
    """
    Asynchronous API client.
    
    Example:
        >>> async with AsyncAPIClient(ClientConfig()) as api:
        ...     data = await api.call('GET', '/health')
    """
    
    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[HttpTransport] = None,
        sdk_version: str = '0.0.0'
    ):
        """
        Initialize async API client.
        
        Args:
            config: Client configuration (uses defaults if not provided)
            transport: Transport to send requests with (aiohttp by default)
            sdk_version: Version reported in the SDK identity header
        """
        self._config = config or ClientConfig.default()
        self._transport = transport or AiohttpTransport(self._config)
        self._builder = RequestBuilder(
            self._config.endpoint,
            JsonCodec(use_decimal=self._config.decimal_numbers)
        )
        self._handler = ResponseHandler(self._builder.codec)
        self._logger = get_logger('appclient.api')
        if not logging.getLogger().handlers:
            self._logger.setLevel(self._config.log_level)
        
        self._headers_lock = threading.Lock()
        self._headers: Dict[str, str] = {
            'content-type': 'application/json',
            'x-sdk-version': f'appclient:python:{sdk_version}',
            'x-appwrite-response-format': RESPONSE_FORMAT,
        }
        self._headers.update(self._config.extra_headers)
    
    @property
    def config(self) -> ClientConfig:
        return self._config
    
    @property
    def transport(self) -> HttpTransport:
        return self._transport
    
    @property
    def endpoint(self) -> str:
        return self._builder.endpoint
    
    @endpoint.setter
    def endpoint(self, value: str):
        self._config.endpoint = value.rstrip('/')
        self._builder.endpoint = self._config.endpoint
    
    @property
    def headers(self) -> Dict[str, str]:
        """Snapshot of the persistent headers."""
        with self._headers_lock:
            return dict(self._headers)
    
    def add_header(self, key: str, value: str) -> 'AsyncAPIClient':
        """Set a persistent header sent with every request."""
        with self._headers_lock:
            for existing in [k for k in self._headers if k.lower() == key.lower()]:
                del self._headers[existing]
            self._headers[key] = value
        return self
    
    def set_self_signed(self, status: bool) -> 'AsyncAPIClient':
        """Switch between strict and permissive TLS verification."""
        self._config.ssl.verify = not status
        reset = getattr(self._transport, 'reset', None)
        if reset is not None:
            reset()
        return self
    
    async def __aenter__(self) -> 'AsyncAPIClient':
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
    
    async def close(self):
        """Close the transport and release connections."""
        await self._transport.close()
    
    def build_request(
        self,
        method: str,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, Any]] = None
    ) -> RequestSpec:
        return self._builder.build(method, path, self.headers, headers, params)
    
    async def call(
        self,
        method: str,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, Any]] = None,
        response_type: type = dict,
        convert: Optional[Converter] = None
    ) -> Any:
        """
        Send one request and interpret its response.
        
        Args:
            method: HTTP method
            path: Path relative to the endpoint
            headers: Per-call headers (override persistent ones)
            params: Request parameters
            response_type: ``dict`` (default), ``bool`` or ``bytes``
            convert: Optional converter applied to the decoded mapping
            
        Returns:
            Interpreted response
            
        Raises:
            TransportError: If the request could not be sent
            ApiError: If the server answered with a failure status
            DecodeError: If the body could not be decoded
        """
        request = self.build_request(method, path, headers, params)
        self._logger.debug(
            f"{request.method} {request.url} headers={redact_headers(request.headers)}"
        )
        
        response = await self._transport.execute(request)
        
        if not response.ok:
            error = self._handler.build_error(response)
            self._logger.error(
                f"{request.method} {request.url} failed with {response.status}: {error}"
            )
            raise error
        
        return self._handler.interpret(response, response_type, convert)
