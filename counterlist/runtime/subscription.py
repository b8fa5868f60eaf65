"""
Change notifications for counterlist.

A UI layer that wants live updates subscribes to the store's "collection
changed" signal instead of wiring observers onto every counter.

Design Philosophy:
    Counters are plain models. Only the store mutates them, so the store is
    the one place that knows something changed and says so.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from enum import Enum
from threading import RLock
from typing import Any, Callable, Optional

import ulid
from pydantic import BaseModel, Field

from counterlist.core.models import Counter

logger = logging.getLogger(__name__)


def generate_id() -> str:
    """Generate a unique, sortable ID using ULID."""
    return str(ulid.new())


class ChangeType(str, Enum):
    """Kinds of collection changes."""

    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"
    LOAD = "load"  # Collection replaced from storage


class ChangeEvent(BaseModel):
    """An event delivered to a subscriber."""

    subscription_id: str = Field(..., description="Subscription that received it")
    change_type: ChangeType = Field(..., description="What happened")
    index: Optional[int] = Field(default=None, description="Position of the affected counter")
    counter: Optional[dict[str, Any]] = Field(
        default=None,
        description="Snapshot of the affected counter, on-disk field names",
    )
    size: int = Field(default=0, description="Collection size after the change")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the change happened"
    )

    model_config = {"extra": "forbid"}


ChangeCallback = Callable[[ChangeEvent], None]


class Subscription(BaseModel):
    """A registered listener for collection changes."""

    id: str = Field(default_factory=generate_id, description="Subscription ID")
    change_types: list[ChangeType] = Field(
        default_factory=list,
        description="Change types to receive; empty means all"
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When subscription was created"
    )
    active: bool = Field(default=True, description="Whether subscription is active")

    events_delivered: int = Field(default=0, description="Number of events delivered")
    last_event_at: Optional[datetime] = Field(default=None, description="Last event delivery time")

    model_config = {"extra": "forbid"}

    def matches(self, change_type: ChangeType) -> bool:
        if not self.active:
            return False
        return not self.change_types or change_type in self.change_types


class ChangeNotifier:
    """
    Manages subscriptions and event delivery.

    Usage:
        ```python
        notifier = ChangeNotifier()
        sub = notifier.subscribe(lambda e: print(e.change_type))
        notifier.notify(ChangeType.ADD, counter, index=0, size=1)
        notifier.unsubscribe(sub.id)
        ```
    """

    def __init__(self):
        self._lock = RLock()
        self._subscriptions: dict[str, Subscription] = {}
        self._callbacks: dict[str, ChangeCallback] = {}

    def subscribe(
        self,
        callback: ChangeCallback,
        change_types: Optional[list[ChangeType]] = None,
    ) -> Subscription:
        """
        Subscribe to collection changes.

        Args:
            callback: Function to call on changes
            change_types: Restrict to these change types (default: all)

        Returns:
            Created subscription
        """
        sub = Subscription(change_types=list(change_types or []))
        with self._lock:
            self._subscriptions[sub.id] = sub
            self._callbacks[sub.id] = callback
        return sub

    def unsubscribe(self, subscription_id: str) -> bool:
        """
        Remove a subscription.

        Returns:
            True if subscription existed and was removed
        """
        with self._lock:
            sub = self._subscriptions.pop(subscription_id, None)
            if sub is None:
                return False
            self._callbacks.pop(subscription_id, None)
            return True

    def notify(
        self,
        change_type: ChangeType,
        counter: Optional[Counter] = None,
        index: Optional[int] = None,
        size: int = 0,
    ) -> int:
        """
        Deliver a change to matching subscribers.

        Returns:
            Number of subscribers notified
        """
        with self._lock:
            to_notify = [
                (self._subscriptions[sid], self._callbacks[sid])
                for sid in self._subscriptions
                if sid in self._callbacks
            ]

        snapshot = counter.to_record() if counter is not None else None

        # Deliver events (outside lock)
        count = 0
        for sub, callback in to_notify:
            if not sub.matches(change_type):
                continue
            event = ChangeEvent(
                subscription_id=sub.id,
                change_type=change_type,
                index=index,
                counter=snapshot,
                size=size,
            )
            try:
                callback(event)
            except Exception as e:
                logger.warning(f"Subscriber {sub.id} failed on {change_type.value}: {e}")
                continue
            sub.events_delivered += 1
            sub.last_event_at = datetime.now(timezone.utc)
            count += 1

        return count

    def get_subscription(self, subscription_id: str) -> Optional[Subscription]:
        """Get a subscription by ID."""
        with self._lock:
            return self._subscriptions.get(subscription_id)

    def subscription_count(self) -> int:
        """Get the number of active subscriptions."""
        with self._lock:
            return sum(1 for s in self._subscriptions.values() if s.active)
