"""Upstream exceptions."""

from gemini_proxy.common.app_error import AppError
from gemini_proxy.config.errors import ErrorCode

__all__ = ["UpstreamError"]


class UpstreamError(AppError):
    """Exception raised when a Gemini API call fails."""

    error_code = ErrorCode.UPSTREAM_ERROR

    def __init__(self, operation: str, cause: BaseException) -> None:
        """Initialize with the failed operation and its cause."""
        super().__init__(f"Failed to {operation}: {cause}")
