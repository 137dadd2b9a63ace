"""Embedding request and response models cloning the OpenAI API."""

from typing import Literal

from pydantic import BaseModel, Field, JsonValue

__all__ = ["EmbedRequest", "EmbedResponse", "EmbedResponseData", "Usage"]


class EmbedRequest(BaseModel):
    """Request body for the embeddings endpoint, modelled after the OpenAI API."""

    input: JsonValue = Field(
        description="Input text to embed. Accepts a single string or a list of strings."
    )

    model: str = Field(
        description="ID of the Gemini model to use, e.g. `text-embedding-004`."
    )

    encoding_format: str | None = Field(
        None,
        description="Only `float` is supported; omit it or send `float`.",
    )

    dimensions: int | None = Field(
        None,
        description="Accepted for compatibility, not forwarded upstream.",
    )

    user: str | None = Field(
        None,
        description="An identifier for your end-user, not forwarded upstream.",
    )


class EmbedResponseData(BaseModel):
    """Single embedding vector in an embeddings response."""

    object: Literal["embedding"] = "embedding"
    embedding: list[float]
    index: int


class Usage(BaseModel):
    """Token usage. Gemini does not report it for embeddings."""

    prompt_tokens: int = 0
    total_tokens: int = 0


class EmbedResponse(BaseModel):
    """OpenAI-compatible embeddings response."""

    object: Literal["list"] = "list"
    data: list[EmbedResponseData]
    model: str
    usage: Usage
