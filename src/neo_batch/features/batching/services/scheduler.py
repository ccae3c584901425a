"""Bounded-concurrency batch scheduler.

Work is split into chunks (or pages) and executed in waves. A wave starts
at most ``max_concurrency`` operations together with ``asyncio.gather``
and the next wave starts only once every operation of the current one
has settled. Results are placed by input position, never by completion
order.

The first failure in a wave propagates unchanged and discards every
result gathered so far. Sibling operations of the failed one are not
cancelled; their results are ignored.
"""

import asyncio
import logging
from functools import partial
from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar, Union

from ....config import get_settings
from ..protocols import ChunkProcessor, PageReader, ProgressCallback
from .chunking import chunk_partition, count_pages, iter_page_spans, require_positive

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

Number = Union[int, float]


def _resolve_max_concurrency(max_concurrency: Optional[int]) -> int:
    """Fall back to the configured wave size when none is given."""
    if max_concurrency is None:
        max_concurrency = get_settings().default_max_concurrency
    return require_positive("max_concurrency", max_concurrency)


async def _run_in_waves(
    operations: Sequence[Callable[[], Awaitable[R]]],
    max_concurrency: int,
    label: str,
) -> List[R]:
    """Run zero-argument operations wave by wave and keep input order."""
    results: List[R] = []
    total_waves = (len(operations) + max_concurrency - 1) // max_concurrency

    for wave_start in range(0, len(operations), max_concurrency):
        wave = operations[wave_start:wave_start + max_concurrency]
        wave_number = wave_start // max_concurrency + 1
        logger.debug(f"{label}: starting wave {wave_number}/{total_waves} with {len(wave)} operations")

        try:
            wave_results = await asyncio.gather(*(operation() for operation in wave))
        except Exception as e:
            logger.warning(f"{label}: wave {wave_number}/{total_waves} failed: {e}")
            raise

        results.extend(wave_results)

    logger.debug(f"{label}: completed {len(operations)} operations in {total_waves} waves")
    return results


async def run_chunks_bounded(
    items: Sequence[T],
    chunk_size: int,
    process: ChunkProcessor[R],
    max_concurrency: Optional[int] = None,
) -> List[R]:
    """Process chunks of items with bounded concurrency.

    Args:
        items: Items to process
        chunk_size: Size of each chunk
        process: Async function called once per chunk
        max_concurrency: Maximum operations per wave (uses configuration if None)

    Returns:
        One result per chunk, in chunk order

    Raises:
        InvalidArgumentError: If chunk_size or max_concurrency < 1
    """
    max_concurrency = _resolve_max_concurrency(max_concurrency)
    chunks = chunk_partition(items, chunk_size)

    operations = [partial(process, chunk) for chunk in chunks]
    return await _run_in_waves(operations, max_concurrency, "chunks")


async def run_chunks_bounded_sum(
    items: Sequence[T],
    chunk_size: int,
    process: ChunkProcessor[Number],
    max_concurrency: Optional[int] = None,
) -> Number:
    """Process chunks with bounded concurrency and sum the per-chunk numbers.

    Empty input gives 0.
    """
    results = await run_chunks_bounded(items, chunk_size, process, max_concurrency)
    return sum(results)


async def run_paginated_bounded(
    total_count: int,
    page_size: int,
    read_page: PageReader[T],
    max_concurrency: Optional[int] = None,
) -> List[T]:
    """Read ``total_count`` records page by page with bounded concurrency.

    Page ``p`` is read with ``offset = p * page_size`` and
    ``limit = min(page_size, total_count - offset)``.

    Args:
        total_count: Total number of records to read
        page_size: Records per page
        read_page: Async function called with (offset, limit)
        max_concurrency: Maximum page reads per wave (uses configuration if None)

    Returns:
        All records flattened in page order

    Raises:
        InvalidArgumentError: If page_size or max_concurrency < 1, or total_count < 0
    """
    max_concurrency = _resolve_max_concurrency(max_concurrency)
    spans = list(iter_page_spans(total_count, page_size))

    operations = [partial(read_page, span.offset, span.limit) for span in spans]
    pages = await _run_in_waves(operations, max_concurrency, "pages")

    records: List[T] = []
    for page in pages:
        records.extend(page)
    return records


async def run_paginated_bounded_with_progress(
    total_count: int,
    page_size: int,
    read_page: PageReader[T],
    max_concurrency: Optional[int] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> List[T]:
    """Same as :func:`run_paginated_bounded` with per-page progress reports.

    After each page completes, the running record count grows by that
    page's length and ``on_progress(page_number, total_pages,
    records_processed)`` is called. Within a wave the calls follow
    completion order, not page order.
    """
    total_pages = count_pages(total_count, page_size)
    records_processed = 0

    async def read_page_with_progress(offset: int, limit: int) -> Sequence[T]:
        nonlocal records_processed
        page = await read_page(offset, limit)
        records_processed += len(page)

        current_page = offset // page_size + 1
        if on_progress is not None:
            on_progress(current_page, total_pages, records_processed)
        return page

    return await run_paginated_bounded(
        total_count,
        page_size,
        read_page_with_progress,
        max_concurrency,
    )
