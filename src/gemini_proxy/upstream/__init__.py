"""Upstream module wrapping the Gemini API and its credential pool."""

from .cancellation import run_until_disconnected
from .dependencies import get_client_pool
from .exceptions import UpstreamError
from .gemini import GeminiClient, UpstreamModel
from .pool import ClientPool, Selection

__all__ = [
    "ClientPool",
    "GeminiClient",
    "Selection",
    "UpstreamError",
    "UpstreamModel",
    "get_client_pool",
    "run_until_disconnected",
]
