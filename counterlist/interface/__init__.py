"""
Interface layer for counterlist.

Provides:
- CounterStore: Synchronous store used by UI bindings
- AsyncCounterStore: Awaitable load/save/flush
- NewCounterForm: Pending input for new counters
"""

from .store import CounterStore
from .async_store import AsyncCounterStore
from .form import NewCounterForm

__all__ = [
    "CounterStore",
    "AsyncCounterStore",
    "NewCounterForm",
]
