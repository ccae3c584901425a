"""Pagination response envelope."""

from typing import Generic, List, TypeVar

from pydantic import Field

from .base import BaseSchema
from .requests import PaginationRequest

T = TypeVar("T")


class PaginationResponse(BaseSchema, Generic[T]):
    """Generic page of results with its position in the full dataset."""

    content: List[T] = Field(description="Items on the current page")
    total: int = Field(ge=0, description="Total number of items")
    page: int = Field(ge=0, description="0-based page number")
    size: int = Field(ge=1, description="Items per page")

    @classmethod
    def create(
        cls,
        content: List[T],
        request: PaginationRequest,
        total: int,
    ) -> "PaginationResponse[T]":
        """Create a response for the page described by ``request``."""
        return cls(
            content=list(content),
            total=total,
            page=request.page,
            size=request.size,
        )

    @property
    def count(self) -> int:
        """Get number of items in current page."""
        return len(self.content)

    @property
    def total_pages(self) -> int:
        """Calculate total number of pages."""
        return (self.total + self.size - 1) // self.size

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.page + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        """Check if there's a previous page."""
        return self.page > 0
