"""Embedding exceptions."""

from gemini_proxy.common.exceptions import BadRequestError
from gemini_proxy.config.errors import ErrorCode

__all__ = ["UnsupportedFormatError", "UnsupportedInputTypeError"]


class UnsupportedFormatError(BadRequestError):
    """Exception raised when an encoding format other than float is requested."""

    error_code = ErrorCode.UNSUPPORTED_FORMAT

    def __init__(self, encoding_format: str) -> None:
        """Initialize with the requested encoding format."""
        super().__init__(f"Unsupported encoding format: {encoding_format}")


class UnsupportedInputTypeError(BadRequestError):
    """Exception raised when the input is neither a string nor a list of strings."""

    error_code = ErrorCode.UNSUPPORTED_INPUT_TYPE

    def __init__(self, type_name: str) -> None:
        """Initialize with the offending type name."""
        super().__init__(f"Unsupported input type: {type_name}")
