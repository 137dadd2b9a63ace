"""Common test fixtures for the application."""

import os

os.environ.setdefault("ENV", "testing")
os.environ.pop("METRICS_ADDR", None)

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from gemini_proxy.app import app
from gemini_proxy.upstream.dependencies import get_client_pool
from gemini_proxy.upstream.pool import ClientPool
from tests.utils import FakeGeminiClient


@pytest.fixture(name="upstream_clients")
def upstream_clients_fixture() -> list[FakeGeminiClient]:
    """Two fake upstream clients, one per configured API key."""
    return [FakeGeminiClient("key-a"), FakeGeminiClient("key-b")]


@pytest.fixture(name="pool")
def pool_fixture(upstream_clients: list[FakeGeminiClient]) -> ClientPool:
    """Client pool over the fake upstream clients."""
    return ClientPool(upstream_clients)


@pytest.fixture(name="client")
def client_fixture(pool: ClientPool) -> Generator[TestClient]:
    """Create a test client for the FastAPI app.

    The lifespan is not run; the pool dependency is overridden instead.

    Args:
        pool: Client pool fixture.

    Returns:
        TestClient: Configured FastAPI test client.
    """
    app.dependency_overrides[get_client_pool] = lambda: pool
    client = TestClient(app, base_url="http://testserver")  # NOSONAR
    yield client

    app.dependency_overrides.clear()
