"""
Constants module
Form field names, media types and error codes kept out of the call sites
"""


class FormFields:
    """Form field names posted by the preview page"""
    FORMAT = "format"
    FIELDS = "fields"
    SUB_MODULES = "subModules"
    ARRAY_SIZE = "arraySize"
    FIELD_TYPE = "fieldType"


class Defaults:
    """Values used when a form field is missing or unusable"""
    FORMAT = "json"
    FIELDS = 5
    SUB_MODULES = 0
    ARRAY_SIZE = 1
    FIELD_TYPE = "string"


class NodeKeys:
    """Key names of a generated node"""
    FIELD_PREFIX = "field"
    SUB_MODULES = "subModules"
    XML_ROOT = "data"

    @classmethod
    def field(cls, index: int) -> str:
        return f"{cls.FIELD_PREFIX}{index}"


class MediaTypes:
    """Response content types"""
    JSON = "application/json"
    XML = "application/xml"
    HTML = "text/html"


class ErrorCodes:
    """Error codes"""
    SERIALIZATION_FAILED = "SERIALIZATION_FAILED"
    INTERNAL_ERROR = "INTERNAL_SERVER_ERROR"


class ErrorMessages:
    """User facing error messages"""
    INVALID_INPUT = "Invalid input."
    SERIALIZATION_FAILED = "Generated data could not be serialized."
    INTERNAL_ERROR = "A server error occurred. Please try again later."


class HTTPHeaders:
    """HTTP header names"""
    REQUEST_ID = "X-Request-Id"
    EXPOSE_HEADERS = "Access-Control-Expose-Headers"
    DEBUG_MODE = "X-Debug-Mode"
