"""
Core module
Settings, constants and exceptions
"""
from dummygen.core.settings import settings, get_settings, validate_required_settings
from dummygen.core.constants import (
    FormFields,
    Defaults,
    NodeKeys,
    MediaTypes,
    ErrorCodes,
    ErrorMessages,
    HTTPHeaders,
)
from dummygen.core.exceptions import (
    AppException,
    PayloadSerializationError,
)

__all__ = [
    # Settings
    "settings",
    "get_settings",
    "validate_required_settings",

    # Constants
    "FormFields",
    "Defaults",
    "NodeKeys",
    "MediaTypes",
    "ErrorCodes",
    "ErrorMessages",
    "HTTPHeaders",

    # Exceptions
    "AppException",
    "PayloadSerializationError",
]
