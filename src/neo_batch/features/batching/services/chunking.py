"""Deterministic partitioning of sequences and paginated ranges."""

from typing import Iterator, List, Sequence, TypeVar

from ....core.exceptions import InvalidArgumentError
from ..entities import PageSpan

T = TypeVar("T")


def require_positive(argument: str, value: int) -> int:
    """Check a size or concurrency argument is at least 1.

    Raises:
        InvalidArgumentError: If ``value`` is below 1
    """
    if value < 1:
        raise InvalidArgumentError(argument, value, ">= 1")
    return value


def chunk_partition(items: Sequence[T], chunk_size: int) -> List[List[T]]:
    """Split items into ordered chunks of ``chunk_size``.

    Chunk ``i`` holds ``items[i * chunk_size:(i + 1) * chunk_size]``; only
    the last chunk may be shorter. Concatenating the chunks gives back
    the input.

    Args:
        items: Items to split
        chunk_size: Size of each chunk

    Returns:
        List of chunks, empty for empty input

    Raises:
        InvalidArgumentError: If chunk_size < 1
    """
    require_positive("chunk_size", chunk_size)
    return [
        list(items[start:start + chunk_size])
        for start in range(0, len(items), chunk_size)
    ]


def count_pages(total_count: int, page_size: int) -> int:
    """Number of pages needed to cover ``total_count`` records."""
    require_positive("page_size", page_size)
    if total_count < 0:
        raise InvalidArgumentError("total_count", total_count, ">= 0")
    return (total_count + page_size - 1) // page_size


def iter_page_spans(total_count: int, page_size: int) -> Iterator[PageSpan]:
    """Yield the offset/limit span of every page in order."""
    for index in range(count_pages(total_count, page_size)):
        offset = index * page_size
        yield PageSpan(
            index=index,
            offset=offset,
            limit=min(page_size, total_count - offset),
        )
