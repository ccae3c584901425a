"""Batching services: partitioning and the wave scheduler."""

from .chunking import chunk_partition, count_pages, iter_page_spans
from .scheduler import (
    run_chunks_bounded,
    run_chunks_bounded_sum,
    run_paginated_bounded,
    run_paginated_bounded_with_progress,
)

__all__ = [
    "chunk_partition",
    "count_pages",
    "iter_page_spans",
    "run_chunks_bounded",
    "run_chunks_bounded_sum",
    "run_paginated_bounded",
    "run_paginated_bounded_with_progress",
]
