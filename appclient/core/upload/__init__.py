"""
Upload module.

Single-request uploads for small files and sequential chunked uploads
for files at or above the chunk bound.
"""
from .coordinator import UploadCoordinator, ID_FIELD, ID_HEADER
from .models import InputFile, UploadProgress, UploadSession
from .protocols import ProgressCallback, RequesterProtocol
from .strategies import FixedSizeChunkingStrategy

__all__ = [
    'UploadCoordinator',
    'ID_FIELD',
    'ID_HEADER',
    'InputFile',
    'UploadProgress',
    'UploadSession',
    'ProgressCallback',
    'RequesterProtocol',
    'FixedSizeChunkingStrategy',
]
