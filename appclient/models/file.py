"""File resource models."""
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class File:
    """
    A stored file.
    
    Attributes mirror the server payload; ``data`` keeps the full mapping.
    """
    id: str
    bucket_id: str
    name: str
    signature: str = ''
    mime_type: str = ''
    size_original: int = 0
    chunks_total: int = 0
    chunks_uploaded: int = 0
    created_at: str = ''
    updated_at: str = ''
    read: List[str] = field(default_factory=list)
    write: List[str] = field(default_factory=list)
    data: Dict[str, Any] = field(default_factory=dict, repr=False)
    
    @property
    def is_complete(self) -> bool:
        return self.chunks_total > 0 and self.chunks_uploaded >= self.chunks_total
    
    @classmethod
    def from_map(cls, data: Dict[str, Any]) -> 'File':
        return cls(
            id=str(data['$id']),
            bucket_id=str(data.get('bucketId', '')),
            name=str(data.get('name', '')),
            signature=str(data.get('signature', '')),
            mime_type=str(data.get('mimeType', '')),
            size_original=int(data.get('sizeOriginal') or 0),
            chunks_total=int(data.get('chunksTotal') or data.get('chunkTotal') or 0),
            chunks_uploaded=int(data.get('chunksUploaded') or data.get('chunkUploaded') or 0),
            created_at=str(data.get('$createdAt', '')),
            updated_at=str(data.get('$updatedAt', '')),
            read=list(data.get('$read', [])),
            write=list(data.get('$write', [])),
            data=dict(data)
        )


@dataclass
class FileList:
    """Page of files."""
    total: int
    files: List[File] = field(default_factory=list)
    
    def __iter__(self):
        return iter(self.files)
    
    def __len__(self) -> int:
        return len(self.files)
    
    @classmethod
    def from_map(cls, data: Dict[str, Any]) -> 'FileList':
        return cls(
            total=int(data.get('total', 0)),
            files=[File.from_map(item) for item in data.get('files', [])]
        )
