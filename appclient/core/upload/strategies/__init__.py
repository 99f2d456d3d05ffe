"""Upload strategies."""
from .chunking import FixedSizeChunkingStrategy

__all__ = ['FixedSizeChunkingStrategy']
