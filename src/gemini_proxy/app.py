"""Main application module for the Gemini proxy."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Final

from fastapi import FastAPI
from loguru import logger
from prometheus_fastapi_instrumentator import Instrumentator

from gemini_proxy.common.exceptions import StartupError
from gemini_proxy.config import config_logger, settings
from gemini_proxy.upstream.pool import ClientPool
from gemini_proxy.utils.banner import create_banner
from gemini_proxy.utils.error_handler import register_exception_handlers
from gemini_proxy.utils.prometheus import add_prometheus_metrics, start_metrics_server
from gemini_proxy.utils.routers import register_routers

config_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Create the client pool on startup and release it on shutdown.

    Raises:
        StartupError: If no API key is configured or a client cannot be created.
    """
    create_banner(settings)

    try:
        pool = ClientPool.from_api_keys(settings.api_keys)
    except StartupError as e:
        logger.critical("Startup failed: {}", e.message)
        raise
    app.state.client_pool = pool

    stop_metrics_server = None
    if settings.metrics_addr:
        stop_metrics_server = start_metrics_server(settings.metrics_addr)

    logger.info("Listening on {}", settings.listen_addr)
    yield

    await pool.aclose()
    if stop_metrics_server is not None:
        stop_metrics_server()


app: Final = FastAPI(
    title="Gemini OpenAI Proxy",
    description="OpenAI-compatible embeddings API backed by Google Gemini",
    version=settings.version,
    lifespan=lifespan,
)


# --------------------------------------------------------
# P R O M E T H E U S
# --------------------------------------------------------
_instrumentator = Instrumentator().instrument(app)
if not settings.metrics_addr:
    _instrumentator.expose(app, include_in_schema=False)
add_prometheus_metrics(app)


# --------------------------------------------------------
# R O U T E R S
# --------------------------------------------------------
register_routers(app)


# --------------------------------------------------------
# E X C E P T I O N S
# --------------------------------------------------------
register_exception_handlers(app)
