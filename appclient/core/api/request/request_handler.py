"""
HTTP execution.

``HttpTransport`` is the seam between the client and the network: it
sends one ``RequestSpec`` and returns a ``RawResponse``. The default
implementation runs on a shared aiohttp session.
"""
import asyncio
from typing import Optional, Protocol, Union

import aiohttp
from multidict import CIMultiDict, CIMultiDictProxy

from ...exceptions import TransportError
from ...logging import get_logger
from ..config import ClientConfig
from .models import FilePart, RawResponse, RequestSpec


class HttpTransport(Protocol):
    """Sends a request and returns the buffered response."""
    
    async def execute(self, request: RequestSpec) -> RawResponse:
        """
        Send a request.
        
        Raises:
            TransportError: If no response could be obtained
        """
        ...
    
    async def close(self) -> None:
        ...


class AiohttpTransport:
    """
    Transport backed by an aiohttp ClientSession.
    
    The session is created lazily and reused for every call. After
    ``reset()`` the next call closes it and opens a fresh one built from
    the current configuration (e.g. after switching TLS mode).
    """
    
    def __init__(self, config: ClientConfig, session: Optional[aiohttp.ClientSession] = None):
        self._config = config
        self._session = session
        self._owns_session = session is None
        self._stale = False
        self._lock: Optional[asyncio.Lock] = None
        self._logger = get_logger('appclient.api.transport')
    
    def reset(self) -> None:
        """Mark the session for rebuild on next use."""
        if self._owns_session:
            self._stale = True
    
    async def _ensure_session(self) -> aiohttp.ClientSession:
        session = self._session
        if not self._stale and session is not None and not session.closed:
            return session
        
        if self._lock is None:
            self._lock = asyncio.Lock()
        # Concurrent callers must end up on the same rebuilt session
        async with self._lock:
            if self._stale:
                self._stale = False
                await self.close()
            if self._session is None or self._session.closed:
                connector = aiohttp.TCPConnector(**self._config.get_connector_kwargs())
                self._session = aiohttp.ClientSession(
                    connector=connector,
                    **self._config.get_session_kwargs()
                )
                self._owns_session = True
                self._logger.debug("Opened new HTTP session")
            return self._session
    
    async def close(self) -> None:
        """Close the session if we own it."""
        if not self._owns_session:
            return
        session, self._session = self._session, None
        if session is not None and not session.closed:
            await session.close()
    
    async def execute(self, request: RequestSpec) -> RawResponse:
        session = await self._ensure_session()
        headers = CIMultiDict(request.headers)
        
        data: Union[bytes, aiohttp.MultipartWriter, None] = None
        if request.form is not None:
            # aiohttp writes the content-type with its boundary
            headers.popall('content-type', None)
            data = self._build_multipart(request)
        elif request.body is not None:
            data = request.body.encode('utf-8')
        
        try:
            async with session.request(
                request.method,
                request.url,
                headers=headers,
                params=request.query or None,
                data=data
            ) as response:
                body = await response.read()
                self._logger.debug(
                    f"{request.method} {request.url} -> {response.status} ({len(body)} bytes)"
                )
                return RawResponse(
                    status=response.status,
                    headers=CIMultiDictProxy(CIMultiDict(response.headers)),
                    body=body
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self._logger.error(f"{request.method} {request.url} failed: {e!r}")
            raise TransportError(f"{request.method} {request.url} failed: {e}") from e
    
    @staticmethod
    def _build_multipart(request: RequestSpec) -> aiohttp.MultipartWriter:
        writer = aiohttp.MultipartWriter('form-data')
        for name, value in request.form or ():
            if isinstance(value, FilePart):
                part = writer.append(
                    bytes(value.content),
                    {'Content-Type': value.content_type}
                )
                part.set_content_disposition('form-data', name=name, filename=value.filename)
            else:
                part = writer.append(value)
                part.set_content_disposition('form-data', name=name)
        return writer
