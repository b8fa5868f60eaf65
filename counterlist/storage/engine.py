"""
Storage engine for counterlist.

The store never touches files directly; it hands whole collections to a
storage backend and gets whole collections back:

- read() returns every persisted counter, in order
- write() replaces everything with the given counters

Implementations:
    - InMemoryStorage: Development and testing
    - JsonFileStorage: The counters.json file (see json_store)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from threading import RLock
from typing import Any, Optional, Sequence

from counterlist.core.errors import StorageError
from counterlist.core.models import Counter


class CounterStorage(ABC):
    """
    Abstract base class for counter storage backends.

    Backends raise StorageError for every failure they can anticipate; the
    caller decides whether that matters.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Whether anything has been persisted yet."""
        pass

    @abstractmethod
    def read(self) -> list[Counter]:
        """
        Read the full persisted collection.

        Returns:
            Counters in persisted order, colors normalized

        Raises:
            StorageError: If the data cannot be read or parsed
        """
        pass

    @abstractmethod
    def write(self, records: Sequence[dict[str, Any]]) -> None:
        """
        Overwrite the persisted collection.

        Args:
            records: Serialized counters (see Counter.to_record), in order

        Raises:
            StorageError: If the data cannot be written
        """
        pass


class InMemoryStorage(CounterStorage):
    """
    In-memory storage implementation for development and testing.

    Keeps the last written records; data is lost when the process exits.
    Set fail_reads / fail_writes to simulate I/O failures.
    """

    def __init__(self, records: Optional[Sequence[dict[str, Any]]] = None):
        self._lock = RLock()
        self._records: Optional[list[dict[str, Any]]] = (
            [dict(r) for r in records] if records is not None else None
        )
        self.write_count = 0
        self.fail_reads = False
        self.fail_writes = False

    def exists(self) -> bool:
        with self._lock:
            return self._records is not None

    def read(self) -> list[Counter]:
        with self._lock:
            if self.fail_reads:
                raise StorageError("Simulated read failure")
            if self._records is None:
                return []
            try:
                return [Counter.from_record(r) for r in self._records]
            except ValueError as e:
                raise StorageError(f"Invalid counter record: {e}") from e

    def write(self, records: Sequence[dict[str, Any]]) -> None:
        with self._lock:
            if self.fail_writes:
                raise StorageError("Simulated write failure")
            self._records = [dict(r) for r in records]
            self.write_count += 1

    @property
    def records(self) -> list[dict[str, Any]]:
        """Copy of the last written records."""
        with self._lock:
            return [dict(r) for r in self._records or []]
