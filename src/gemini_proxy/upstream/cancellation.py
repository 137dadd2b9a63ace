"""Tie upstream calls to the lifetime of the inbound request."""

import asyncio
from collections.abc import Coroutine
from typing import Any, Protocol, TypeVar

from loguru import logger

from gemini_proxy.common.exceptions import ClientDisconnectedError

__all__ = ["DisconnectAware", "run_until_disconnected"]

T = TypeVar("T")


class DisconnectAware(Protocol):
    """Anything that can report a client disconnect, e.g. a Starlette request."""

    async def is_disconnected(self) -> bool: ...


async def run_until_disconnected(
    request: DisconnectAware,
    call: Coroutine[Any, Any, T],
    poll_interval: float,
) -> T:
    """Await ``call`` unless the client disconnects first.

    The call runs as its own task. Every ``poll_interval`` seconds the
    request is checked; once the client is gone the task is cancelled and
    its result is never used.

    Args:
        request: Inbound request to watch.
        call: Upstream coroutine to run.
        poll_interval: Seconds between disconnect checks.

    Returns:
        The result of ``call``.

    Raises:
        ClientDisconnectedError: If the client disconnected before completion.
    """
    task = asyncio.ensure_future(call)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                logger.info("Client disconnected, cancelling upstream call")
                raise ClientDisconnectedError
    finally:
        if not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
