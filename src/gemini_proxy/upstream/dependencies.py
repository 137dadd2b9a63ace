"""FastAPI dependencies for upstream access."""

from fastapi import Request

from .pool import ClientPool

__all__ = ["get_client_pool"]


def get_client_pool(request: Request) -> ClientPool:
    """Return the client pool created by the application lifespan."""
    return request.app.state.client_pool
