"""
Client - High-level async client for the API.

Example:
    >>> async with Client('https://cloud.example.com/v1') as client:
    ...     client.set_project('5df5acd0d48c2').set_key('919c2d18fb5d4...')
    ...     file = await client.storage.create_file('photos', 'unique()', 'big.iso')
"""
from typing import Any, Dict, Mapping, Optional

from .core.api import AsyncAPIClient, ClientConfig, Converter, HttpTransport
from .core.upload import ProgressCallback, UploadCoordinator
from .services import Storage
from ._version import __version__


class Client:
    """
    High-level async client.
    
    Holds the endpoint, the persistent headers and the TLS mode for one
    session. Setters return the client so they can be chained.
    """
    
    def __init__(
        self,
        endpoint: Optional[str] = None,
        self_signed: bool = False,
        config: Optional[ClientConfig] = None,
        transport: Optional[HttpTransport] = None
    ):
        """
        Initialize client.
        
        Args:
            endpoint: Base URL of the API (overrides ``config.endpoint``)
            self_signed: Accept self-signed certificates
            config: Full client configuration
            transport: Custom transport (aiohttp by default)
        """
        # Own copy; setters below must not leak into the caller's config
        config = config.copy() if config is not None else ClientConfig.default()
        if endpoint is not None:
            config.endpoint = endpoint.rstrip('/')
        if self_signed:
            config.ssl.verify = False
        
        self._api = AsyncAPIClient(config, transport, sdk_version=__version__)
        self._uploader = UploadCoordinator(self._api, config.chunk_size)
        self.config: Dict[str, str] = {}
        
        self.storage = Storage(self)
    
    @property
    def api(self) -> AsyncAPIClient:
        return self._api
    
    @property
    def endpoint(self) -> str:
        return self._api.endpoint
    
    @property
    def self_signed(self) -> bool:
        return self._api.config.self_signed
    
    @property
    def headers(self) -> Dict[str, str]:
        return self._api.headers
    
    @property
    def chunk_size(self) -> int:
        return self._uploader.chunk_size
    
    async def __aenter__(self) -> 'Client':
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
    
    async def close(self):
        await self._api.close()
    
    def set_project(self, value: str) -> 'Client':
        """Set the project id."""
        self.config['project'] = value
        return self.add_header('x-appwrite-project', value)
    
    def set_key(self, value: str) -> 'Client':
        """Set the secret API key."""
        self.config['key'] = value
        return self.add_header('x-appwrite-key', value)
    
    def set_jwt(self, value: str) -> 'Client':
        """Set the JSON Web Token."""
        self.config['jwt'] = value
        return self.add_header('x-appwrite-jwt', value)
    
    def set_locale(self, value: str) -> 'Client':
        self.config['locale'] = value
        return self.add_header('x-appwrite-locale', value)
    
    def set_self_signed(self, status: bool = True) -> 'Client':
        """Accept (True) or reject (False) self-signed certificates."""
        self._api.set_self_signed(status)
        return self
    
    def set_endpoint(self, endpoint: str) -> 'Client':
        self._api.endpoint = endpoint
        return self
    
    def add_header(self, key: str, value: str) -> 'Client':
        self._api.add_header(key, value)
        return self
    
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
        Send one request.
        
        See ``AsyncAPIClient.call``.
        """
        return await self._api.call(method, path, headers, params, response_type, convert)
    
    async def chunked_upload(
        self,
        path: str,
        headers: Optional[Mapping[str, str]],
        params: Mapping[str, Any],
        convert: Optional[Converter] = None,
        param_name: str = 'file',
        response_type: type = dict,
        on_progress: Optional[ProgressCallback] = None
    ) -> Any:
        """
        Upload a file, in chunks when it reaches the chunk size.
        
        See ``UploadCoordinator.upload``.
        """
        return await self._uploader.upload(
            path,
            headers,
            params,
            param_name=param_name,
            response_type=response_type,
            convert=convert,
            on_progress=on_progress
        )
