# coding: utf-8
"""
Main store interface for counterlist.

CounterStore owns the ordered counter collection and persists all of it
after every change. A UI layer binds its intents to the store methods and
renders get_all().

Usage:
    ```python
    from counterlist import CounterStore

    store = CounterStore.open()          # loads counters.json if present
    laps = store.add("Laps", "10", "Red")
    store.increment(laps)
    store.reset(laps)
    store.delete(laps)
    store.close()                        # waits for pending saves
    ```
"""

from __future__ import annotations

import logging
from pathlib import Path
from threading import RLock
from typing import Any, Optional

from counterlist.core.config import Settings, get_settings
from counterlist.core.errors import StorageError
from counterlist.core.models import Counter, normalize_name
from counterlist.core.palette import available_colors, hex_for, normalize_color_name
from counterlist.runtime.persistence import SaveQueue
from counterlist.runtime.subscription import (
    ChangeCallback,
    ChangeNotifier,
    ChangeType,
    Subscription,
)
from counterlist.storage.engine import CounterStorage
from counterlist.storage.json_store import JsonFileStorage

logger = logging.getLogger(__name__)


class CounterStore:
    """
    The owner of the counter collection and its persistence.

    Every mutation updates memory, notifies subscribers and schedules a
    save of the whole collection. Mutations never block on I/O and never
    raise for storage failures; a failed save is logged and the next one
    catches up.

    Counter references are compared by identity. Passing None or a counter
    that is not in this store is a no-op.
    """

    def __init__(
        self,
        storage: Optional[CounterStorage] = None,
        settings: Optional[Settings] = None,
        save_queue: Optional[SaveQueue] = None,
    ):
        """
        Initialize an empty store. Call load() to read persisted counters.

        Args:
            storage: Storage backend (defaults to the configured JSON file)
            settings: Settings to use instead of the environment
            save_queue: Queue running the saves
        """
        self._settings = settings or get_settings()
        self._storage = storage or JsonFileStorage(self._settings.save_path)
        self._saves = save_queue or SaveQueue(background=self._settings.async_saves)
        self._notifier = ChangeNotifier()
        self._lock = RLock()
        self._counters: list[Counter] = []

    @classmethod
    def open(
        cls,
        path: Optional[Path] = None,
        settings: Optional[Settings] = None,
    ) -> CounterStore:
        """Create a store backed by a JSON file and load it."""
        settings = settings or get_settings()
        storage = JsonFileStorage(path) if path is not None else None
        store = cls(storage=storage, settings=settings)
        store.load()
        return store

    # =========================================================================
    # Reading
    # =========================================================================

    def get_all(self) -> tuple[Counter, ...]:
        """Ordered, read-only view of the collection."""
        with self._lock:
            return tuple(self._counters)

    def __len__(self) -> int:
        with self._lock:
            return len(self._counters)

    def __contains__(self, counter: object) -> bool:
        return self._index_of(counter) is not None

    @staticmethod
    def available_colors() -> list[str]:
        """The ten palette color names, in picker order."""
        return available_colors()

    @property
    def storage(self) -> CounterStorage:
        return self._storage

    # =========================================================================
    # Mutations
    # =========================================================================

    def add(
        self,
        name: Optional[str],
        initial_value_text: Optional[str],
        color_name: Optional[str],
    ) -> Counter:
        """
        Append a new counter built from form input.

        Args:
            name: Label; trimmed, blank becomes "Counter"
            initial_value_text: Integer text; unparseable becomes 0
            color_name: Palette name; blank or unknown becomes "Blue"

        Returns:
            The counter that was added
        """
        counter = Counter.create(name, initial_value_text, color_name)
        with self._lock:
            self._counters.append(counter)
            index = len(self._counters) - 1
        logger.debug(f"Added counter {counter.name!r} at {index}")
        self._changed(ChangeType.ADD, counter, index)
        return counter

    def increment(self, counter: Optional[Counter]) -> None:
        self._set_value(counter, lambda c: c.value + 1)

    def decrement(self, counter: Optional[Counter]) -> None:
        self._set_value(counter, lambda c: c.value - 1)

    def reset(self, counter: Optional[Counter]) -> None:
        """Set the counter back to its initial value."""
        self._set_value(counter, lambda c: c.initial_value)

    def delete(self, counter: Optional[Counter]) -> None:
        """Remove a counter; the remaining counters keep their order."""
        with self._lock:
            index = self._index_of(counter)
            if index is None:
                return
            del self._counters[index]
        logger.debug(f"Deleted counter {counter.name!r} from {index}")
        self._changed(ChangeType.DELETE, counter, index)

    def update(
        self,
        counter: Optional[Counter],
        name: Optional[str] = None,
        initial_value: Optional[int] = None,
        color_name: Optional[str] = None,
    ) -> bool:
        """
        Edit fields of a counter in the store.

        Only the given fields change. The color hex follows the color name.
        The current value is left alone, even when initial_value changes.

        Returns:
            True if anything changed (and a save was scheduled)
        """
        with self._lock:
            index = self._index_of(counter)
            if index is None:
                return False

            changes: dict[str, Any] = {}
            if name is not None:
                changes["name"] = normalize_name(name)
            if initial_value is not None:
                changes["initial_value"] = int(initial_value)
            if color_name is not None:
                color = normalize_color_name(color_name)
                changes["color_name"] = color
                changes["color_hex"] = hex_for(color)

            changed = False
            for field, new in changes.items():
                if getattr(counter, field) != new:
                    setattr(counter, field, new)
                    changed = True

        if changed:
            self._changed(ChangeType.UPDATE, counter, index)
        return changed

    # =========================================================================
    # Persistence
    # =========================================================================

    def load(self) -> bool:
        """
        Replace the collection with the persisted counters.

        A missing file, unreadable file or malformed content leaves the
        collection as it is.

        Returns:
            True if the collection was replaced
        """
        if not self._storage.exists():
            logger.debug("No persisted counters, keeping current collection")
            return False
        try:
            loaded = self._storage.read()
        except StorageError as e:
            logger.warning(f"Failed to load counters: {e}")
            return False

        with self._lock:
            self._counters = list(loaded)
            size = len(self._counters)
        logger.debug(f"Loaded {size} counters")
        self._notifier.notify(ChangeType.LOAD, size=size)
        return True

    def save(self) -> bool:
        """
        Write the whole collection now and wait for it.

        The write goes through the save queue behind any saves already
        scheduled, so it never overlaps a background write.

        Returns:
            True if the write succeeded
        """
        with self._lock:
            snapshot = self._snapshot()
            future = self._saves.submit(lambda: self._write(snapshot))
        return future.result()

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Wait for scheduled saves to be written."""
        return self._saves.flush(timeout)

    def close(self) -> None:
        """Wait for scheduled saves and stop the save worker."""
        self._saves.close()

    def __enter__(self) -> CounterStore:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # =========================================================================
    # Subscriptions
    # =========================================================================

    def subscribe(
        self,
        callback: ChangeCallback,
        change_types: Optional[list[ChangeType]] = None,
    ) -> Subscription:
        """Subscribe to collection changes (add, update, delete, load)."""
        return self._notifier.subscribe(callback, change_types)

    def unsubscribe(self, subscription_id: str) -> bool:
        return self._notifier.unsubscribe(subscription_id)

    # =========================================================================
    # Internal
    # =========================================================================

    def _index_of(self, counter: object) -> Optional[int]:
        if counter is None:
            return None
        with self._lock:
            for i, c in enumerate(self._counters):
                if c is counter:
                    return i
        return None

    def _set_value(self, counter: Optional[Counter], compute) -> None:
        with self._lock:
            index = self._index_of(counter)
            if index is None:
                return
            new_value = compute(counter)
            if new_value == counter.value:
                return
            counter.value = new_value
        self._changed(ChangeType.UPDATE, counter, index)

    def _snapshot(self) -> list[dict[str, Any]]:
        with self._lock:
            return [c.to_record() for c in self._counters]

    def _changed(self, change_type: ChangeType, counter: Counter, index: int) -> None:
        # Snapshot and enqueue together so saves land in mutation order.
        with self._lock:
            snapshot = self._snapshot()
            self._saves.submit(lambda: self._write(snapshot))
        self._notifier.notify(change_type, counter, index=index, size=len(snapshot))

    def _write(self, records: list[dict[str, Any]]) -> bool:
        try:
            self._storage.write(records)
        except StorageError as e:
            logger.warning(f"Failed to save counters: {e}")
            return False
        return True
