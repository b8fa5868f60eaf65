# coding: utf-8
"""
Async wrapper for CounterStore.

Mutations are already non-blocking; only the operations that touch the
disk (load, save, flush) get awaitable versions here.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from counterlist.core.models import Counter
    from .store import CounterStore


class AsyncCounterStore:
    """
    Async wrapper for CounterStore.

    Runs blocking store calls in a thread pool executor.

    Example:
        async with AsyncCounterStore(store) as astore:
            await astore.load()
            astore.store.increment(counter)
            await astore.flush()
    """

    def __init__(
        self,
        store: "CounterStore",
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        """
        Initialize the async wrapper.

        Args:
            store: CounterStore instance
            executor: Optional ThreadPoolExecutor
        """
        self._store = store
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=1)

    @property
    def store(self) -> "CounterStore":
        return self._store

    def get_all(self) -> Tuple["Counter", ...]:
        return self._store.get_all()

    async def load(self) -> bool:
        """Load persisted counters without blocking the event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self._store.load)

    async def save(self) -> bool:
        """Write the whole collection without blocking the event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self._store.save)

    async def flush(self, timeout: Optional[float] = None) -> bool:
        """Wait for scheduled saves."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self._executor,
            lambda: self._store.flush(timeout),
        )

    def close(self) -> None:
        """Close the store and shut down our executor."""
        self._store.close()
        if self._owns_executor:
            self._executor.shutdown(wait=False)

    async def __aenter__(self) -> "AsyncCounterStore":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.flush()
        self.close()
