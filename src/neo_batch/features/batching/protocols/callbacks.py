"""Callback protocols accepted by the batch scheduler.

The scheduler performs no I/O of its own. Every network or storage call
happens inside one of these caller-supplied callables.
"""

from typing import Any, List, Protocol, Sequence, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)
R_co = TypeVar("R_co", covariant=True)


@runtime_checkable
class ChunkProcessor(Protocol[R_co]):
    """Async function processing one chunk of items."""

    async def __call__(self, chunk: List[Any]) -> R_co:
        """Process a chunk and return its result.

        Args:
            chunk: Contiguous slice of the input items

        Returns:
            Result for this chunk
        """
        ...


@runtime_checkable
class PageReader(Protocol[T_co]):
    """Async function reading one page of a larger dataset."""

    async def __call__(self, offset: int, limit: int) -> Sequence[T_co]:
        """Read ``limit`` records starting at ``offset``."""
        ...


@runtime_checkable
class ProgressCallback(Protocol):
    """Synchronous progress hook invoked after each completed page."""

    def __call__(self, current_page: int, total_pages: int, records_processed: int) -> None:
        """Report progress.

        Args:
            current_page: 1-based number of the page that just completed
            total_pages: Total number of pages in the run
            records_processed: Records read so far across all completed pages
        """
        ...
