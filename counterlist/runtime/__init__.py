"""
Runtime layer for counterlist.

Provides execution-time features:
- Background, ordered saves
- Change subscriptions
"""

from counterlist.runtime.persistence import SaveQueue
from counterlist.runtime.subscription import ChangeEvent, ChangeNotifier, ChangeType, Subscription

__all__ = [
    "SaveQueue",
    "ChangeEvent",
    "ChangeNotifier",
    "ChangeType",
    "Subscription",
]
