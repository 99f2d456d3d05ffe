"""
Data models for upload module.

Uses dataclasses for type-safe data structures.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union
import mimetypes


@dataclass
class InputFile:
    """
    A local file to upload.
    
    Attributes:
        path: Path to the file
        filename: Name sent in the multipart part (defaults to the path name)
        mime_type: Content type of the part (guessed from the name when omitted)
    """
    path: Path
    filename: Optional[str] = None
    mime_type: Optional[str] = None
    
    def __post_init__(self):
        if isinstance(self.path, str):
            self.path = Path(self.path)
        if self.filename is None:
            self.filename = self.path.name
        if self.mime_type is None:
            guessed, _ = mimetypes.guess_type(self.filename)
            self.mime_type = guessed or 'application/octet-stream'
    
    @classmethod
    def from_path(cls, path: Union[str, Path]) -> 'InputFile':
        return cls(path=Path(path))


def normalize_input_file(file: Union['InputFile', str, Path]) -> InputFile:
    if isinstance(file, InputFile):
        return file
    if isinstance(file, (str, Path)):
        return InputFile.from_path(file)
    raise TypeError(f"Unsupported upload file: {type(file).__name__}")


@dataclass(frozen=True)
class UploadProgress:
    """
    Snapshot of a chunked upload after one chunk.
    
    Attributes:
        id: Server-assigned resource id
        progress: Percent complete, 0-100
        size_uploaded: Bytes sent so far
        chunks_total: Total chunk count reported by the server
        chunks_uploaded: Uploaded chunk count reported by the server
    """
    id: str
    progress: float
    size_uploaded: int
    chunks_total: int
    chunks_uploaded: int
    
    @property
    def is_complete(self) -> bool:
        return self.progress >= 100


@dataclass
class UploadSession:
    """
    Mutable state of one chunked upload.
    
    ``offset`` advances by ``chunk_size`` after every successful chunk;
    ``resource_id`` is set from the first chunk response and forwarded on
    all later chunks.
    """
    file: InputFile
    size: int
    chunk_size: int
    offset: int = 0
    resource_id: Optional[str] = None
    last_response: Optional[Dict[str, Any]] = None
    chunks_sent: int = 0
    
    @property
    def uploaded(self) -> int:
        return min(self.offset, self.size)
    
    def advance(self, response: Dict[str, Any], resource_id: str) -> None:
        self.offset += self.chunk_size
        self.resource_id = resource_id
        self.last_response = response
        self.chunks_sent += 1
    
    def progress(self) -> UploadProgress:
        response = self.last_response or {}
        return UploadProgress(
            id=self.resource_id or '',
            progress=self.uploaded / self.size * 100,
            size_uploaded=self.uploaded,
            chunks_total=int(response.get('chunkTotal') or 0),
            chunks_uploaded=int(response.get('chunkUploaded') or 0)
        )
