"""Neo-Batch - batch-processing primitives for paginated and chunked data sources.

This library provides chunk partitioning, wave-based bounded concurrency
over caller-supplied async work, paginated offset/limit replay with
progress reporting, keyed list comparison and pagination entities.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    BatchSettings,
    get_settings,
    PaginationLimits,
)

from .core.exceptions import (
    NeoBatchError,
    InvalidArgumentError,
    ValidationError,
    PaginationValidationError,
    create_error_response,
)

from .features.batching import (
    PageSpan,
    ChunkProcessor,
    PageReader,
    ProgressCallback,
    chunk_partition,
    count_pages,
    iter_page_spans,
    run_chunks_bounded,
    run_chunks_bounded_sum,
    run_paginated_bounded,
    run_paginated_bounded_with_progress,
)

from .features.comparison import (
    KeyedComparison,
    compare_by_key,
)

from .features.pagination import (
    PaginationRequest,
    PaginationResponse,
    paginate,
    validate_pagination_request,
)

__all__ = [
    "__version__",

    # Configuration
    "BatchSettings",
    "get_settings",
    "PaginationLimits",

    # Exceptions
    "NeoBatchError",
    "InvalidArgumentError",
    "ValidationError",
    "PaginationValidationError",
    "create_error_response",

    # Batching
    "PageSpan",
    "ChunkProcessor",
    "PageReader",
    "ProgressCallback",
    "chunk_partition",
    "count_pages",
    "iter_page_spans",
    "run_chunks_bounded",
    "run_chunks_bounded_sum",
    "run_paginated_bounded",
    "run_paginated_bounded_with_progress",

    # Comparison
    "KeyedComparison",
    "compare_by_key",

    # Pagination
    "PaginationRequest",
    "PaginationResponse",
    "paginate",
    "validate_pagination_request",
]
