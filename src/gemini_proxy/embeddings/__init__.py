"""Embeddings module translating OpenAI embedding requests to Gemini."""

from .converter import (
    EmbeddingBatch,
    Many,
    Single,
    convert_request,
    convert_response,
    parse_input,
)
from .exceptions import UnsupportedFormatError, UnsupportedInputTypeError
from .schemas import EmbedRequest, EmbedResponse, EmbedResponseData, Usage

__all__ = [
    "EmbedRequest",
    "EmbedResponse",
    "EmbedResponseData",
    "EmbeddingBatch",
    "Many",
    "Single",
    "UnsupportedFormatError",
    "UnsupportedInputTypeError",
    "Usage",
    "convert_request",
    "convert_response",
    "parse_input",
]
