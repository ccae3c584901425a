"""Base exceptions for neo-batch.

All neo-batch exceptions inherit from NeoBatchError and carry an error
code plus a details mapping. Exceptions raised by caller-supplied
callbacks are never wrapped in these types.
"""

from typing import Any, Dict, Optional


class NeoBatchError(Exception):
    """Base exception for all neo-batch errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: NeoBatchError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The neo-batch exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
