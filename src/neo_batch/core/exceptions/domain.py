"""Domain exceptions for neo-batch.

Precondition violations raised by the scheduler and validation failures
raised by the pagination entities.
"""

from typing import Any, Dict, List, Optional

from .base import NeoBatchError


class InvalidArgumentError(NeoBatchError):
    """Raised when a scheduler argument violates its precondition."""

    def __init__(self, argument: str, value: Any, constraint: str):
        super().__init__(
            f"Invalid {argument}={value!r}: must be {constraint}",
            details={"argument": argument, "value": value, "constraint": constraint},
        )
        self.argument = argument
        self.value = value


class ValidationError(NeoBatchError):
    """Raised when input validation fails."""
    pass


class PaginationValidationError(ValidationError):
    """Raised when a pagination request fails its bounds.

    ``details["errors"]`` holds one entry per failing field with the
    field name, the violated constraint, the message and the input value.
    """

    def __init__(self, errors: List[Dict[str, Any]], message: Optional[str] = None):
        fields = ", ".join(error["field"] for error in errors)
        super().__init__(
            message or f"Invalid pagination request: {fields}",
            details={"errors": errors},
        )
        self.errors = errors

    @property
    def fields(self) -> List[str]:
        """Names of the fields that failed validation."""
        return [error["field"] for error in self.errors]
