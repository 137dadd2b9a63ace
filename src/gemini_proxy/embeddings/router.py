"""Embeddings router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from loguru import logger

from gemini_proxy.upstream.dependencies import get_client_pool
from gemini_proxy.upstream.pool import ClientPool

from .schemas import EmbedRequest, EmbedResponse
from .service import create_embeddings_svc

__all__ = ["router"]


router = APIRouter(tags=["Embeddings"])


@router.post("/embeddings", summary="Create embeddings")
async def create_embeddings(
    data: EmbedRequest,
    request: Request,
    pool: Annotated[ClientPool, Depends(get_client_pool)],
) -> EmbedResponse:
    """Create embeddings for the input text with a Gemini model.

    Args:
        data: OpenAI-compatible embedding request.
        request: The HTTP request, watched for client disconnects.
        pool: Upstream client pool.

    Returns:
        EmbedResponse: OpenAI-compatible response with one embedding per input.

    Raises:
        UnsupportedFormatError: If `encoding_format` is not `float`.
        UnsupportedInputTypeError: If `input` is not a string or list of strings.
        UpstreamError: If the Gemini API call fails.
    """
    with logger.contextualize(
        path=request.url.path, user_agent=request.headers.get("user-agent")
    ):
        return await create_embeddings_svc(request, data, pool)
