"""Pagination request entity and its validation entry point."""

from typing import Any, Dict, List, Mapping, Optional

from pydantic import ConfigDict, Field, ValidationError as PydanticValidationError

from ....config.constants import PaginationLimits
from ....core.exceptions import PaginationValidationError
from .base import BaseSchema


class PaginationRequest(BaseSchema):
    """Offset pagination request with a 0-based page number."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(
        PaginationLimits.DEFAULT_PAGE,
        ge=PaginationLimits.MIN_PAGE,
        description="0-based page number",
    )
    size: int = Field(
        PaginationLimits.DEFAULT_PAGE_SIZE,
        ge=PaginationLimits.MIN_PAGE_SIZE,
        le=PaginationLimits.MAX_PAGE_SIZE,
        description="Items per page",
    )

    @property
    def offset(self) -> int:
        """Calculate offset for a data source query."""
        return self.page * self.size

    @property
    def limit(self) -> int:
        """Get limit (alias for size)."""
        return self.size


def _field_errors(error: PydanticValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into field/constraint entries."""
    return [
        {
            "field": ".".join(str(part) for part in detail["loc"]) or "__root__",
            "constraint": detail["type"],
            "message": detail["msg"],
            "value": detail.get("input"),
        }
        for detail in error.errors()
    ]


def validate_pagination_request(data: Optional[Mapping[str, Any]] = None) -> PaginationRequest:
    """Validate raw input into a PaginationRequest.

    Missing fields take their defaults.

    Args:
        data: Raw request values, e.g. parsed query parameters

    Returns:
        Validated pagination request

    Raises:
        PaginationValidationError: If any field fails its bounds; the error
            details list every failing field and constraint
    """
    try:
        return PaginationRequest.model_validate(dict(data or {}))
    except PydanticValidationError as e:
        raise PaginationValidationError(_field_errors(e)) from e
