"""
Storage layer for counterlist.

Provides pluggable storage backends for the counter collection,
with the JSON file implementation used by default.
"""

from counterlist.storage.engine import CounterStorage, InMemoryStorage
from counterlist.storage.json_store import JsonFileStorage

__all__ = [
    "CounterStorage",
    "InMemoryStorage",
    "JsonFileStorage",
]
