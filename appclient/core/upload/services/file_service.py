"""
File validation and reading services.

Single Responsibility: Each class handles one specific task.
"""
from pathlib import Path
from typing import Optional, Tuple, Union
import aiofiles

from ...logging import get_logger


class FileValidator:
    """
    Validates files before upload.
    
    Responsibilities:
    - Check file existence
    - Verify file is not a directory
    - Get file size
    """
    
    def validate(self, file_path: Union[str, Path]) -> Tuple[Path, int]:
        """
        Validate a file for upload.
        
        Args:
            file_path: Path to the file
            
        Returns:
            Tuple of (validated Path, file size in bytes)
            
        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If path is not a regular file
        """
        path = Path(file_path) if isinstance(file_path, str) else file_path
        
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        
        if not path.is_file():
            raise ValueError(f"Path is not a file: {path}")
        
        return path, path.stat().st_size


class AsyncFileReader:
    """
    Sequential chunk reader over one file.
    
    Reads fill a single buffer allocated once per reader; the view
    returned by ``read_chunk()`` is overwritten by the next read.
    Use as an async context manager so the handle is closed on every
    exit path, cancellation included.
    """
    
    def __init__(self, chunk_size: int):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self._logger = get_logger('appclient.upload.file')
        self._buffer = bytearray(chunk_size)
        self._file_handle = None
        self._current_file_path: Optional[Path] = None
    
    @property
    def chunk_size(self) -> int:
        return len(self._buffer)
    
    @property
    def is_open(self) -> bool:
        return self._file_handle is not None
    
    async def open_file(self, file_path: Path) -> None:
        """Open file for reading. Call this before reading chunks."""
        if self._file_handle is not None:
            await self.close_file()
        
        self._file_handle = await aiofiles.open(file_path, 'rb')
        self._current_file_path = file_path
    
    async def close_file(self) -> None:
        """Close the currently open file."""
        if self._file_handle is not None:
            await self._file_handle.close()
            self._logger.debug(f"Closed {self._current_file_path}")
            self._file_handle = None
            self._current_file_path = None
    
    async def __aenter__(self) -> 'AsyncFileReader':
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close_file()
    
    async def read_chunk(self) -> memoryview:
        """
        Read up to ``chunk_size`` bytes from the current position.
        
        Returns:
            View of the bytes read; empty once the file is exhausted
        """
        if self._file_handle is None:
            raise ValueError("No file open")
        
        view = memoryview(self._buffer)
        filled = 0
        while filled < len(view):
            count = await self._file_handle.readinto(view[filled:])
            if not count:
                break
            filled += count
        
        return view[:filled]
    
    @staticmethod
    async def read_file(file_path: Path) -> bytes:
        """Read an entire file."""
        async with aiofiles.open(file_path, 'rb') as f:
            return await f.read()
