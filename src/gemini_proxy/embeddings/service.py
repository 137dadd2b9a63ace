"""Embeddings service."""

from loguru import logger

from gemini_proxy.config import settings
from gemini_proxy.upstream.cancellation import DisconnectAware, run_until_disconnected
from gemini_proxy.upstream.pool import ClientPool
from gemini_proxy.utils.prometheus import EMBEDDING_BATCH_SIZE

from .converter import convert_request, convert_response
from .schemas import EmbedRequest, EmbedResponse

__all__ = ["create_embeddings_svc"]


async def create_embeddings_svc(
    request: DisconnectAware, data: EmbedRequest, pool: ClientPool
) -> EmbedResponse:
    """Embed the request input with the next client of the pool.

    Picks a client in round-robin order, converts the request into a Gemini
    batch, submits it and converts the vectors back. An empty input list is
    answered without an upstream call.

    Args:
        request: Inbound request, used to abandon the upstream call on disconnect.
        data: The OpenAI-shaped embedding request.
        pool: Upstream clients to rotate over.

    Returns:
        EmbedResponse: One embedding per input item, in input order.

    Raises:
        UnsupportedFormatError: If an encoding format other than float is requested.
        UnsupportedInputTypeError: If the input is not a string or list of strings.
        UpstreamError: If the Gemini call fails.
        ClientDisconnectedError: If the client went away during the call.
    """
    selection = pool.next_client()
    logger.info("Processing request", model=data.model, client=selection.index)

    batch = convert_request(data, data.model)

    vectors: list[list[float]] = []
    if batch:
        vectors = await run_until_disconnected(
            request,
            selection.client.embed_batch(batch),
            settings.disconnect_poll_interval,
        )
        EMBEDDING_BATCH_SIZE.labels(data.model).observe(len(batch))
        logger.debug("Batch embedded", model=data.model, size=len(batch))

    return convert_response(vectors, data.model)
