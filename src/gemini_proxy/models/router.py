"""Model listing router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from loguru import logger

from gemini_proxy.upstream.dependencies import get_client_pool
from gemini_proxy.upstream.pool import ClientPool

from .schemas import ModelResponse
from .service import list_embedding_models_svc

__all__ = ["router"]


router = APIRouter(tags=["Models"])


@router.get("/models", summary="List embedding models")
async def list_models(
    request: Request,
    pool: Annotated[ClientPool, Depends(get_client_pool)],
) -> ModelResponse:
    """List the Gemini models that support embeddings.

    Args:
        request: The HTTP request, watched for client disconnects.
        pool: Upstream client pool.

    Returns:
        ModelResponse: OpenAI-compatible model list.

    Raises:
        UpstreamError: If the Gemini model catalog cannot be enumerated.
    """
    with logger.contextualize(
        path=request.url.path, user_agent=request.headers.get("user-agent")
    ):
        return await list_embedding_models_svc(request, pool)
