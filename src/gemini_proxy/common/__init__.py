"""Common module for shared error handling.

This module provides foundational components used throughout the proxy,
in particular the application error hierarchy that the global exception
handlers translate into uniform JSON error responses.

Key Components:
- App errors: Application-specific error types with structured error codes
- HTTP exceptions: Error types mapped to proper status codes
"""

from .app_error import AppError
from .exceptions import (
    BadRequestError,
    ClientDisconnectedError,
    StartupError,
)

__all__ = [
    "AppError",
    "BadRequestError",
    "ClientDisconnectedError",
    "StartupError",
]
