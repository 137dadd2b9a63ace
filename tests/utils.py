"""Fake upstream clients and metric helpers for tests."""

import asyncio
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from prometheus_client import REGISTRY

from gemini_proxy.embeddings.converter import EmbeddingBatch
from gemini_proxy.upstream.exceptions import UpstreamError
from gemini_proxy.upstream.gemini import UpstreamModel

__all__ = ["CATALOG", "FakeGeminiClient", "capture_logs", "sample_value"]


CATALOG = [
    UpstreamModel("models/gemini-1.5-flash", ("generateContent", "countTokens")),
    UpstreamModel("models/text-embedding-004", ("embedContent",)),
    UpstreamModel("models/aqa", ("generateAnswer",)),
    UpstreamModel("models/gemini-embedding-001", ("embedContent", "countTokens")),
    UpstreamModel("models/no-actions"),
]


class FakeGeminiClient:
    """In-memory stand-in for GeminiClient.

    Each vector is ``[len(text), position]`` so tests can check order.
    """

    def __init__(
        self,
        name: str = "fake",
        models: list[UpstreamModel] | None = None,
        embed_error: Exception | None = None,
        list_error_after: int | None = None,
        delay: float = 0,
    ) -> None:
        self.name = name
        self.models = CATALOG if models is None else models
        self.embed_error = embed_error
        self.list_error_after = list_error_after
        self.delay = delay
        self.batches: list[EmbeddingBatch] = []
        self.listed_models: list[UpstreamModel] = []
        self.cancelled = False
        self.closed = False

    async def embed_batch(self, batch: EmbeddingBatch) -> list[list[float]]:
        self.batches.append(batch)
        if self.embed_error is not None:
            raise self.embed_error
        if self.delay:
            try:
                await asyncio.sleep(self.delay)
            except asyncio.CancelledError:
                self.cancelled = True
                raise
        return [
            [float(len(text)), float(position)]
            for position, text in enumerate(batch.texts)
        ]

    async def list_models(self):  # noqa: ANN201
        for position, model in enumerate(self.models):
            if position == self.list_error_after:
                raise UpstreamError("list models", RuntimeError("page fetch failed"))
            self.listed_models.append(model)
            yield model

    async def aclose(self) -> None:
        self.closed = True


def sample_value(name: str, labels: dict[str, str]) -> float:
    """Current value of a sample in the default registry, 0.0 if absent."""
    return REGISTRY.get_sample_value(name, labels) or 0.0


@contextmanager
def capture_logs() -> Generator[list[dict[str, Any]]]:
    """Collect the loguru records emitted inside the block."""
    records: list[dict[str, Any]] = []
    sink_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    try:
        yield records
    finally:
        logger.remove(sink_id)
