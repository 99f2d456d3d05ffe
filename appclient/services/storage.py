"""
Storage service.

File endpoints of the API built on ``Client.call`` and
``Client.chunked_upload``.
"""
from typing import TYPE_CHECKING, List, Optional, Union
from pathlib import Path

from ..core.api.request import MULTIPART_FORM
from ..core.upload import InputFile, ProgressCallback
from ..models import File, FileList

if TYPE_CHECKING:
    from ..client import Client


class Storage:
    """
    Storage API.
    
    Example:
        >>> file = await client.storage.create_file(
        ...     'photos', 'unique()', 'holiday.jpg',
        ...     on_progress=lambda p: print(f"{p.progress:.1f}%")
        ... )
    """
    
    def __init__(self, client: 'Client'):
        self._client = client
    
    async def list_files(
        self,
        bucket_id: str,
        search: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        queries: Optional[List[str]] = None
    ) -> FileList:
        """List files in a bucket."""
        return await self._client.call(
            'GET',
            f'/storage/buckets/{bucket_id}/files',
            params={
                'search': search,
                'limit': limit,
                'offset': offset,
                'queries': queries,
            },
            convert=FileList.from_map
        )
    
    async def create_file(
        self,
        bucket_id: str,
        file_id: str,
        file: Union[InputFile, str, Path],
        read: Optional[List[str]] = None,
        write: Optional[List[str]] = None,
        on_progress: Optional[ProgressCallback] = None
    ) -> File:
        """
        Upload a file.
        
        Files at or above the client's chunk size are sent in chunks and
        ``on_progress`` is called after each one.
        """
        return await self._client.chunked_upload(
            f'/storage/buckets/{bucket_id}/files',
            headers={'content-type': MULTIPART_FORM},
            params={
                'fileId': file_id,
                'file': file,
                'read': read,
                'write': write,
            },
            convert=File.from_map,
            param_name='file',
            on_progress=on_progress
        )
    
    async def get_file(self, bucket_id: str, file_id: str) -> File:
        return await self._client.call(
            'GET',
            f'/storage/buckets/{bucket_id}/files/{file_id}',
            convert=File.from_map
        )
    
    async def update_file(
        self,
        bucket_id: str,
        file_id: str,
        read: Optional[List[str]] = None,
        write: Optional[List[str]] = None
    ) -> File:
        return await self._client.call(
            'PUT',
            f'/storage/buckets/{bucket_id}/files/{file_id}',
            params={'read': read, 'write': write},
            convert=File.from_map
        )
    
    async def delete_file(self, bucket_id: str, file_id: str) -> bool:
        return await self._client.call(
            'DELETE',
            f'/storage/buckets/{bucket_id}/files/{file_id}',
            response_type=bool
        )
    
    async def get_file_download(self, bucket_id: str, file_id: str) -> bytes:
        """Download file contents."""
        return await self._client.call(
            'GET',
            f'/storage/buckets/{bucket_id}/files/{file_id}/download',
            response_type=bytes
        )
