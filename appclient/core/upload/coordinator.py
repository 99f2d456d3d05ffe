"""
Upload coordinator.

Runs the chunked upload state machine on top of single API calls:
files below the chunk bound go up in one multipart request, larger
files are streamed chunk by chunk with ``Content-Range`` framing and the
server-assigned id forwarded on every chunk after the first.
"""
import inspect
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from multidict import CIMultiDict

from ..api.config import DEFAULT_CHUNK_SIZE
from ..api.request import FilePart, MULTIPART_FORM
from ..api.types import Converter
from ..exceptions import DecodeError
from ..logging import get_logger
from .models import InputFile, UploadSession, normalize_input_file
from .protocols import ProgressCallback, RequesterProtocol
from .services import AsyncFileReader, FileValidator
from .strategies import FixedSizeChunkingStrategy

logger = get_logger('appclient.upload')

ID_FIELD = '$id'
ID_HEADER = 'x-appwrite-id'
RANGE_HEADER = 'content-range'


class UploadCoordinator:
    """
    Coordinates chunked uploads.
    
    Chunks are strictly sequential: chunk n+1 needs the range and the
    resource id produced by chunk n. A failed chunk aborts the upload;
    nothing is retried or resumed.
    """
    
    def __init__(
        self,
        api_client: RequesterProtocol,
        chunk_size: int = DEFAULT_CHUNK_SIZE
    ):
        """
        Initialize upload coordinator.
        
        Args:
            api_client: Client used for every request
            chunk_size: Chunk bound in bytes
        """
        self._api = api_client
        self._chunking = FixedSizeChunkingStrategy(chunk_size)
        self._validator = FileValidator()
    
    @property
    def chunk_size(self) -> int:
        return self._chunking.chunk_size
    
    async def upload(
        self,
        path: str,
        headers: Optional[Mapping[str, str]],
        params: Mapping[str, Any],
        param_name: str = 'file',
        response_type: type = dict,
        convert: Optional[Converter] = None,
        on_progress: Optional[ProgressCallback] = None
    ) -> Any:
        """
        Upload the file found under ``params[param_name]``.
        
        Args:
            path: API path receiving the upload
            headers: Per-call headers
            params: Request parameters including the file
            param_name: Name of the file parameter
            response_type: Target type of the single-request path
            convert: Converter applied to the final response mapping
            on_progress: Called after every chunk (sync or async)
            
        Returns:
            Converted result of the last request
            
        Raises:
            ValueError: If the file parameter is missing
            FileNotFoundError: If the file doesn't exist
            ApiError: If any request fails; the upload stops there
        """
        if params.get(param_name) is None:
            raise ValueError(f"Missing file parameter '{param_name}'")
        
        file = normalize_input_file(params[param_name])
        file_path, size = self._validator.validate(file.path)
        request_headers = CIMultiDict(headers or {})
        request_headers.setdefault('content-type', MULTIPART_FORM)
        request_params = dict(params)
        
        if not self._chunking.requires_chunking(size):
            logger.info(f"Uploading {file.filename} ({size} bytes) in a single request")
            content = await AsyncFileReader.read_file(file_path)
            request_params[param_name] = self._file_part(param_name, file, content)
            return await self._api.call(
                'POST', path, request_headers, request_params, response_type, convert
            )
        
        session = UploadSession(file=file, size=size, chunk_size=self.chunk_size)
        await self._upload_chunks(
            session, file_path, path, request_headers, request_params, param_name, on_progress
        )
        
        logger.info(
            f"Uploaded {file.filename} as {session.resource_id} in {session.chunks_sent} chunks"
        )
        result = session.last_response
        return convert(result) if convert is not None else result
    
    async def _upload_chunks(
        self,
        session: UploadSession,
        file_path: Path,
        path: str,
        headers: CIMultiDict,
        params: Dict[str, Any],
        param_name: str,
        on_progress: Optional[ProgressCallback]
    ) -> None:
        expected = len(self._chunking.calculate_chunks(session.size))
        logger.info(
            f"Uploading {session.file.filename} ({session.size} bytes) in {expected} chunks"
        )
        
        async with AsyncFileReader(self.chunk_size) as reader:
            await reader.open_file(file_path)
            while session.offset < session.size:
                chunk = await reader.read_chunk()
                if not chunk:
                    break
                # Bytes appended after validation are not part of the upload
                chunk = chunk[:session.size - session.offset]
                
                params[param_name] = self._file_part(param_name, session.file, chunk)
                headers[RANGE_HEADER] = self._chunking.content_range(
                    session.offset, len(chunk), session.size
                )
                logger.debug(f"Sending chunk {session.chunks_sent + 1}/{expected}: {headers[RANGE_HEADER]}")
                
                try:
                    response = await self._api.call('POST', path, headers, params, dict)
                except Exception as e:
                    logger.error(
                        f"Chunk {session.chunks_sent + 1}/{expected} of {session.file.filename} failed: {e}"
                    )
                    raise
                
                resource_id = self._resource_id(response)
                session.advance(response, resource_id)
                headers[ID_HEADER] = resource_id
                
                if on_progress is not None:
                    outcome = on_progress(session.progress())
                    if inspect.isawaitable(outcome):
                        await outcome
    
    @staticmethod
    def _resource_id(response: Any) -> str:
        if not isinstance(response, dict) or response.get(ID_FIELD) is None:
            raise DecodeError(f"Chunk response has no '{ID_FIELD}' field", repr(response))
        return str(response[ID_FIELD])
    
    @staticmethod
    def _file_part(
        param_name: str,
        file: InputFile,
        content: Union[bytes, memoryview]
    ) -> FilePart:
        return FilePart(
            name=param_name,
            filename=file.filename,
            content=content,
            content_type=file.mime_type
        )
