"""Constants for neo-batch.

Pagination bounds and scheduler defaults shared by the pagination
entities and the batching services.
"""

from typing import Final


class PaginationLimits:
    """Bounds for offset pagination requests."""

    MIN_PAGE: Final[int] = 0
    DEFAULT_PAGE: Final[int] = 0
    MIN_PAGE_SIZE: Final[int] = 1
    MAX_PAGE_SIZE: Final[int] = 100
    DEFAULT_PAGE_SIZE: Final[int] = 10


class BatchDefaults:
    """Fallback values for the batch scheduler."""

    MAX_CONCURRENCY: Final[int] = 5
