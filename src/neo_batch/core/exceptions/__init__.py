"""Exception hierarchy for neo-batch."""

from .base import (
    NeoBatchError,
    create_error_response,
)

from .domain import (
    InvalidArgumentError,
    ValidationError,
    PaginationValidationError,
)

__all__ = [
    # Base
    "NeoBatchError",
    "create_error_response",

    # Domain
    "InvalidArgumentError",
    "ValidationError",
    "PaginationValidationError",
]
