"""Thin async wrapper around the Google Gen AI SDK client."""

from collections.abc import AsyncIterator
from dataclasses import dataclass

from google import genai
from loguru import logger

from gemini_proxy.embeddings.converter import EmbeddingBatch

from .exceptions import UpstreamError

__all__ = ["EMBED_CONTENT_ACTION", "GeminiClient", "UpstreamModel"]


EMBED_CONTENT_ACTION = "embedContent"


@dataclass(frozen=True, slots=True)
class UpstreamModel:
    """Catalog entry of a Gemini model."""

    name: str
    supported_actions: tuple[str, ...] = ()

    @property
    def supports_embedding(self) -> bool:
        """Whether the model can produce embeddings."""
        return EMBED_CONTENT_ACTION in self.supported_actions


class GeminiClient:
    """Gemini client authenticated with a single API key."""

    def __init__(self, api_key: str) -> None:
        """Create the SDK client for ``api_key``."""
        self._client = genai.Client(api_key=api_key)

    async def embed_batch(self, batch: EmbeddingBatch) -> list[list[float]]:
        """Embed every text of ``batch`` in one upstream call.

        Args:
            batch: Texts and target model.

        Returns:
            One vector per text, in submission order.

        Raises:
            UpstreamError: If the call fails or returns a mismatched count.
        """
        try:
            response = await self._client.aio.models.embed_content(
                model=batch.model, contents=list(batch.texts)
            )
        except Exception as e:
            raise UpstreamError("batch embed contents", e) from e

        embeddings = response.embeddings or []
        if len(embeddings) != len(batch):
            raise UpstreamError(
                "batch embed contents",
                ValueError(f"expected {len(batch)} embeddings, got {len(embeddings)}"),
            )
        return [list(embedding.values or []) for embedding in embeddings]

    async def list_models(self) -> AsyncIterator[UpstreamModel]:
        """Iterate over the full model catalog, fetching pages lazily.

        Yields:
            UpstreamModel: Each model of the catalog.

        Raises:
            UpstreamError: If fetching a page fails.
        """
        try:
            pager = await self._client.aio.models.list()
            async for model in pager:
                yield UpstreamModel(
                    name=model.name or "",
                    supported_actions=tuple(model.supported_actions or ()),
                )
        except Exception as e:
            raise UpstreamError("list models", e) from e

    async def aclose(self) -> None:
        """Release the underlying HTTP connections."""
        await self._client.aio.aclose()
        logger.debug("Gemini client closed")
