"""Common exceptions."""

from fastapi import status

from gemini_proxy.common.app_error import AppError
from gemini_proxy.config.errors import ErrorCode, ErrorNames

__all__ = [
    "BadRequestError",
    "ClientDisconnectedError",
    "StartupError",
]

# Non-standard status used by nginx for requests abandoned by the client.
HTTP_499_CLIENT_CLOSED_REQUEST = 499


class BadRequestError(AppError):
    """Exception raised when the request cannot be processed as sent."""

    error_code = ErrorCode.BAD_REQUEST
    message = "Bad request"
    public_message = ErrorNames.BAD_REQUEST
    status_code = status.HTTP_400_BAD_REQUEST


class ClientDisconnectedError(AppError):
    """Exception raised when the client goes away before the response is ready."""

    error_code = ErrorCode.CLIENT_CLOSED_REQUEST
    message = "Client disconnected, upstream call abandoned"
    public_message = ErrorNames.CLIENT_CLOSED_REQUEST
    status_code = HTTP_499_CLIENT_CLOSED_REQUEST


class StartupError(AppError):
    """Exception raised when the proxy cannot be started."""

    error_code = ErrorCode.STARTUP_ERROR
    message = "Startup failed"
