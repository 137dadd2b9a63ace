"""Generic application errors."""

from fastapi import status

from gemini_proxy.config.errors import ErrorCode, ErrorNames

__all__ = ["AppError"]


class AppError(Exception):
    """Base exception for application errors.

    ``message`` carries the internal detail and is only logged. Clients receive
    ``public_message``, which never includes request or upstream specifics.
    """

    error_code = ErrorCode.SERVER_ERROR
    message = "An unexpected error occurred"
    public_message: str = ErrorNames.INTERNAL_SERVER_ERROR
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None) -> None:
        """Initialize with optional custom message."""
        if message:
            self.message = message
        super().__init__(self.message)
