"""Batch scheduling for chunked and paginated data sources.

Provides:
- Deterministic chunk partitioning
- Wave-based bounded concurrency over chunks
- Sum aggregation of per-chunk results
- Paginated offset/limit replay with optional progress reporting
"""

from .entities import PageSpan
from .protocols import ChunkProcessor, PageReader, ProgressCallback
from .services import (
    chunk_partition,
    count_pages,
    iter_page_spans,
    run_chunks_bounded,
    run_chunks_bounded_sum,
    run_paginated_bounded,
    run_paginated_bounded_with_progress,
)

__all__ = [
    # Entities
    "PageSpan",

    # Protocols
    "ChunkProcessor",
    "PageReader",
    "ProgressCallback",

    # Services
    "chunk_partition",
    "count_pages",
    "iter_page_spans",
    "run_chunks_bounded",
    "run_chunks_bounded_sum",
    "run_paginated_bounded",
    "run_paginated_bounded_with_progress",
]
