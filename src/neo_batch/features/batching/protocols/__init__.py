"""Batching protocols."""

from .callbacks import ChunkProcessor, PageReader, ProgressCallback

__all__ = [
    "ChunkProcessor",
    "PageReader",
    "ProgressCallback",
]
