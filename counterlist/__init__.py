"""
counterlist - Named, colored counters persisted to a JSON file.

A store binds UI intents (add, increment, decrement, reset, delete) to a
list of counters and writes the whole list to counters.json after every
change.

Layers:
- core: Counter model, color palette, settings
- storage: Storage backends (JSON file, in-memory)
- runtime: Background saves and change notifications
- interface: CounterStore, its async wrapper and the new-counter form
"""
from counterlist.core.models import Counter
from counterlist.core.palette import COLOR_MAP, DEFAULT_COLOR, available_colors
from counterlist.core.config import Settings, get_settings, configure_logging
from counterlist.core.errors import CounterListError, StorageError
from counterlist.storage.engine import CounterStorage, InMemoryStorage
from counterlist.storage.json_store import JsonFileStorage
from counterlist.runtime.persistence import SaveQueue
from counterlist.runtime.subscription import ChangeEvent, ChangeNotifier, ChangeType, Subscription
from counterlist.interface.store import CounterStore
from counterlist.interface.async_store import AsyncCounterStore
from counterlist.interface.form import NewCounterForm

__version__ = "0.1.0"

__all__ = [
    # Core
    "Counter",
    "COLOR_MAP",
    "DEFAULT_COLOR",
    "available_colors",
    "Settings",
    "get_settings",
    "configure_logging",
    "CounterListError",
    "StorageError",
    # Storage
    "CounterStorage",
    "InMemoryStorage",
    "JsonFileStorage",
    # Runtime
    "SaveQueue",
    "ChangeEvent",
    "ChangeNotifier",
    "ChangeType",
    "Subscription",
    # Interface
    "CounterStore",
    "AsyncCounterStore",
    "NewCounterForm",
]
