"""Text constants for consistent error handling."""

from enum import StrEnum

__all__ = ["ErrorCode", "ErrorNames"]


class ErrorCode(StrEnum):
    """Error codes for standardized error handling."""

    # General errors
    SERVER_ERROR = "SERVER_ERROR"
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    CLIENT_CLOSED_REQUEST = "CLIENT_CLOSED_REQUEST"

    # Embedding errors
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    UNSUPPORTED_INPUT_TYPE = "UNSUPPORTED_INPUT_TYPE"

    # Upstream errors
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    STARTUP_ERROR = "STARTUP_ERROR"


class ErrorNames(StrEnum):
    """Error names for standardized error handling."""

    INTERNAL_SERVER_ERROR = "Internal Server Error"
    BAD_REQUEST = "Bad Request"
    METHOD_NOT_ALLOWED = "Method Not Allowed"
    NOT_FOUND = "Not Found"
    CLIENT_CLOSED_REQUEST = "Client Closed Request"
