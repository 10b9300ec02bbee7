"""
Custom exception classes
Exception hierarchy for consistent error responses
"""
from typing import Any, Dict, Optional
from fastapi import status

from dummygen.core.constants import ErrorCodes, ErrorMessages


class AppException(Exception):
    """
    Base application exception
    Parent of every custom exception
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class PayloadSerializationError(AppException):
    """A generated value has no text representation"""

    def __init__(
        self,
        key: str,
        value_type: str,
        message: str = ErrorMessages.SERIALIZATION_FAILED
    ):
        super().__init__(
            code=ErrorCodes.SERIALIZATION_FAILED,
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"key": key, "value_type": value_type}
        )
