"""Pagination entities for requests and responses."""

from .base import BaseSchema
from .requests import PaginationRequest, validate_pagination_request
from .responses import PaginationResponse

__all__ = [
    "BaseSchema",
    "PaginationRequest",
    "PaginationResponse",
    "validate_pagination_request",
]
