"""Prometheus metrics for tracking custom metrics."""

import time
from collections.abc import Callable
from http import HTTPStatus

from fastapi import FastAPI, status
from loguru import logger
from prometheus_client import Counter, Gauge, Histogram, start_http_server
from starlette.routing import Match
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from gemini_proxy.config.config import split_address

__all__ = [
    "EMBEDDING_BATCH_SIZE",
    "REQUESTS_IN_PROGRESS",
    "REQUESTS_TOTAL",
    "REQUEST_LATENCY",
    "RequestMetricsMiddleware",
    "add_prometheus_metrics",
    "start_metrics_server",
]

REQUESTS_IN_PROGRESS = Gauge(
    "http_requests_in_progress_total",
    "Active HTTP requests",
    ["method", "path"],
)

REQUESTS_TOTAL = Counter(
    "requests_total",
    "Total number of requests",
    ["path", "method", "status"],
)

REQUEST_LATENCY = Histogram(
    "request_latency_seconds",
    "Request latency in seconds",
    ["path", "method"],
)

EMBEDDING_BATCH_SIZE = Histogram(
    "embedding_batch_size",
    "Size of embedding batches",
    ["model"],
    buckets=[float(size) for size in range(1, 11)],
)


def add_prometheus_metrics(app: FastAPI) -> None:
    """Configure the FastAPI application to record per-request metrics.

    Tracks in-flight requests, and records a status counter and a latency
    observation for every request to a registered route, including rejected
    ones. Requests to unknown paths are not recorded.

    Args:
        app: The FastAPI application instance where the middleware will be added.
    """
    app.add_middleware(RequestMetricsMiddleware)


class RequestMetricsMiddleware:
    """ASGI middleware tracking in-flight requests, outcomes and latency.

    Implemented on the raw ASGI interface so ``receive`` reaches the
    endpoint untouched and client disconnects stay observable.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        path = _route_path(scope)
        if path is None:
            await self.app(scope, receive, send)
            return

        method = scope["method"]
        start = time.perf_counter()
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        REQUESTS_IN_PROGRESS.labels(method, path).inc()
        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            REQUESTS_IN_PROGRESS.labels(method, path).dec()
            REQUESTS_TOTAL.labels(path, method, _status_text(status_code)).inc()
            REQUEST_LATENCY.labels(path, method).observe(time.perf_counter() - start)


def _route_path(scope: Scope) -> str | None:
    """Path template of the route matching the request, ignoring the method."""
    partial = None
    for route in scope["app"].routes:
        match, _ = route.matches(scope)
        if match == Match.FULL:
            return route.path
        if match == Match.PARTIAL and partial is None:
            partial = route.path
    return partial


def _status_text(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return str(status_code)


def start_metrics_server(addr: str) -> Callable[[], None]:
    """Serve the default registry on a separate address in a background thread.

    Args:
        addr: Listen address in ``host:port`` form.

    Returns:
        Callable that stops the server.
    """
    host, port = split_address(addr)
    server, thread = start_http_server(port, addr=host)
    logger.info("Exposing metrics on {}/metrics", addr)

    def stop() -> None:
        server.shutdown()
        thread.join(timeout=5)

    return stop
