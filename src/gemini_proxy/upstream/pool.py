"""Round-robin pool of upstream clients, one per API key."""

import threading
from collections.abc import Callable, Iterable, Sequence
from typing import NamedTuple

from loguru import logger

from gemini_proxy.common.exceptions import StartupError

from .gemini import GeminiClient

__all__ = ["ClientPool", "Selection"]


class Selection(NamedTuple):
    """Client picked for a request together with its pool slot."""

    index: int
    client: GeminiClient


class ClientPool:
    """Fixed, ordered set of upstream clients with round-robin selection.

    The counter is the only mutable state. Every call to ``next_client``
    increments it exactly once under a lock and selects ``counter % size``,
    so concurrent callers each get their own slot.
    """

    def __init__(self, clients: Sequence[GeminiClient]) -> None:
        """Wrap already constructed clients.

        Raises:
            StartupError: If ``clients`` is empty.
        """
        if not clients:
            raise StartupError("Client pool needs at least one client")
        self._clients = tuple(clients)
        self._counter = 0
        self._lock = threading.Lock()

    @classmethod
    def from_api_keys(
        cls,
        api_keys: Iterable[str],
        factory: Callable[[str], GeminiClient] = GeminiClient,
    ) -> "ClientPool":
        """Create one client per API key, preserving order.

        Args:
            api_keys: Credentials in configuration order.
            factory: Builds a client from a single key.

        Returns:
            ClientPool: Pool over all created clients.

        Raises:
            StartupError: If no key is given or any client cannot be created.
        """
        clients = []
        for position, key in enumerate(api_keys):
            try:
                clients.append(factory(key))
            except Exception as e:
                raise StartupError(
                    f"Failed to create Gemini client for key #{position}: {e}"
                ) from e
        if not clients:
            raise StartupError("GEMINI_API_KEY is required")
        logger.info("Gemini client pool ready", size=len(clients))
        return cls(clients)

    def __len__(self) -> int:
        return len(self._clients)

    @property
    def primary(self) -> GeminiClient:
        """Client used for requests that need no rotation, e.g. model listing."""
        return self._clients[0]

    @property
    def counter(self) -> int:
        """Number of selections made so far."""
        with self._lock:
            return self._counter

    def next_index(self) -> int:
        """Advance the counter and return the slot it now points at."""
        with self._lock:
            self._counter += 1
            return self._counter % len(self._clients)

    def next_client(self) -> Selection:
        """Pick the next client in round-robin order."""
        index = self.next_index()
        return Selection(index, self._clients[index])

    async def aclose(self) -> None:
        """Close every client of the pool."""
        for client in self._clients:
            await client.aclose()
