from __future__ import annotations

"""
Application Error Hierarchy.

Errors carry a human message, an internal numeric code, an optional HTTP
status code and an optional symbolic code, and can be converted to a plain
dictionary for API responses or structured reports. The file logger itself
never raises these to its callers.
"""

from typing import Any, Dict, Optional


class AppError(Exception):
    """Base class for application errors."""

    def __init__(
            self,
            message: str,
            code: int = 0,
            http_code: Optional[int] = None,
            error_code: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_code = http_code
        self.error_code = error_code

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the error into a structured record.

        Returns:
            Dict[str, Any]: message, code, error_code and http_code.
        """
        return {
            "message": self.message,
            "code": self.code,
            "error_code": self.error_code,
            "http_code": self.http_code,
        }


class NotFoundError(AppError):
    """Requested data or resource does not exist."""
    CODE = 0
    HTTP_ERROR_CODE = 404
    ERROR_CODE = "NOT_FOUND"

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, self.CODE, self.HTTP_ERROR_CODE, self.ERROR_CODE)


class ValidationError(AppError):
    """Provided data does not pass validation rules."""
    CODE = 0
    HTTP_ERROR_CODE = 400
    ERROR_CODE = "NOT_VALID"

    def __init__(self, message: str = "Data not valid") -> None:
        super().__init__(message, self.CODE, self.HTTP_ERROR_CODE, self.ERROR_CODE)
