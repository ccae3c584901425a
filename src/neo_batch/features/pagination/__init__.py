"""Offset pagination entities.

- PaginationRequest: validated page/size descriptor
- PaginationResponse: content envelope with total and position
- paginate: slice an in-memory sequence into a response
"""

from .entities import (
    BaseSchema,
    PaginationRequest,
    PaginationResponse,
    validate_pagination_request,
)
from .services import paginate

__all__ = [
    "BaseSchema",
    "PaginationRequest",
    "PaginationResponse",
    "paginate",
    "validate_pagination_request",
]
