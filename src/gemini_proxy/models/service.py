"""Model listing service."""

from loguru import logger

from gemini_proxy.config import settings
from gemini_proxy.upstream.cancellation import DisconnectAware, run_until_disconnected
from gemini_proxy.upstream.gemini import GeminiClient, UpstreamModel
from gemini_proxy.upstream.pool import ClientPool

from .schemas import ModelResponse, ModelResponseData

__all__ = ["list_embedding_models_svc"]


async def _collect_embedding_models(client: GeminiClient) -> list[UpstreamModel]:
    return [model async for model in client.list_models() if model.supports_embedding]


async def list_embedding_models_svc(
    request: DisconnectAware, pool: ClientPool
) -> ModelResponse:
    """List the Gemini models able to create embeddings.

    The whole catalog is drained from the primary client before anything is
    returned; an error on any page discards what was collected so far.

    Args:
        request: Inbound request, used to abandon enumeration on disconnect.
        pool: Upstream clients; only the primary one is used.

    Returns:
        ModelResponse: Embedding-capable models in catalog order.

    Raises:
        UpstreamError: If enumerating the catalog fails.
        ClientDisconnectedError: If the client went away during enumeration.
    """
    models = await run_until_disconnected(
        request,
        _collect_embedding_models(pool.primary),
        settings.disconnect_poll_interval,
    )
    logger.debug("Embedding models listed", count=len(models))
    return ModelResponse(data=[ModelResponseData(id=model.name) for model in models])
