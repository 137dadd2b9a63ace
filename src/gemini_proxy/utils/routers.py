"""Router Initializer."""

from fastapi import FastAPI

from gemini_proxy.common.router import router as common_router
from gemini_proxy.embeddings.router import router as embeddings_router
from gemini_proxy.models.router import router as models_router

__all__ = ["register_routers"]


def register_routers(app: FastAPI) -> None:
    """Register all API routers with the FastAPI application.

    Args:
        app: FastAPI application instance.
    """
    app.include_router(common_router)
    app.include_router(embeddings_router, prefix="/v1")
    app.include_router(models_router, prefix="/v1")
