"""Page span entity describing one offset/limit read."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageSpan:
    """A single page of a paginated read.

    ``limit`` is clipped on the last page so a run never reads past
    ``total_count``.
    """

    index: int
    offset: int
    limit: int

    @property
    def page_number(self) -> int:
        """1-based page number used in progress reports."""
        return self.index + 1

    @property
    def end(self) -> int:
        """Exclusive end offset of this page."""
        return self.offset + self.limit
