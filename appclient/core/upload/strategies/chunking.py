"""
Chunking strategy for file uploads.

Fixed-size segments framed with ``Content-Range`` headers.
"""
from typing import List, Tuple


class FixedSizeChunkingStrategy:
    """Splits a file into fixed-size segments; the last may be shorter."""
    
    def __init__(self, chunk_size: int):
        """
        Initialize with chunk size.
        
        Args:
            chunk_size: Size of each chunk in bytes
        """
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.chunk_size = chunk_size
    
    def requires_chunking(self, file_size: int) -> bool:
        """Files strictly smaller than one chunk go up in a single request."""
        return file_size >= self.chunk_size
    
    def calculate_chunks(self, file_size: int) -> List[Tuple[int, int]]:
        """
        Calculate fixed-size chunk boundaries.
        
        Args:
            file_size: Total file size in bytes
            
        Returns:
            List of (start, end) tuples, end exclusive
        """
        chunks = []
        position = 0
        
        while position < file_size:
            end = min(position + self.chunk_size, file_size)
            chunks.append((position, end))
            position = end
        
        return chunks
    
    def content_range(self, offset: int, length: int, file_size: int) -> str:
        """``Content-Range`` value for ``length`` bytes starting at ``offset``."""
        return f"bytes {offset}-{offset + length - 1}/{file_size}"
