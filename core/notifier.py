"""
StateNotifier - Design State
============================

Synchronous publish/subscribe channel.

• Listeners are called in subscription order, exactly once per publish
• Membership is fixed when a publish starts; (un)subscribing from inside a
  listener takes effect on the next publish
• A failing listener is logged and skipped: later listeners still run and
  the publisher never sees the exception

Usage:
    notifier = StateNotifier()
    sub = notifier.subscribe(lambda state: print(state.theme_name))
    notifier.publish(state)
    sub.cancel()
"""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Callable, Generic, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]


class Subscription:
    """Handle returned by StateNotifier.subscribe()."""

    def __init__(self, notifier: "StateNotifier", listener: Listener, sub_id: int):
        self._notifier = notifier
        self.listener = listener
        self.id = sub_id

    @property
    def active(self) -> bool:
        return self._notifier.is_subscribed(self)

    def cancel(self) -> bool:
        return self._notifier.unsubscribe(self)

    def __repr__(self) -> str:
        name = getattr(self.listener, "__qualname__", repr(self.listener))
        return f"<Subscription #{self.id} {name}>"


class StateNotifier(Generic[T]):

    def __init__(self, name: str = "state"):
        self.name = name
        self._subscriptions: List[Subscription] = []
        self._lock = threading.Lock()
        self._ids = itertools.count(1)

    # --------------------------------------------------
    # Membership
    # --------------------------------------------------
    def subscribe(self, listener: Listener) -> Subscription:
        if not callable(listener):
            raise TypeError(f"listener must be callable, got {type(listener).__name__}")

        with self._lock:
            sub = Subscription(self, listener, next(self._ids))
            self._subscriptions.append(sub)

        logger.debug(f"[{self.name}] subscribed {sub!r}")
        return sub

    def unsubscribe(self, subscription: Subscription) -> bool:
        """Remove a subscription. Returns False if it was not active."""
        with self._lock:
            try:
                self._subscriptions.remove(subscription)
            except ValueError:
                return False

        logger.debug(f"[{self.name}] unsubscribed {subscription!r}")
        return True

    def is_subscribed(self, subscription: Subscription) -> bool:
        with self._lock:
            return subscription in self._subscriptions

    def clear(self) -> int:
        with self._lock:
            count = len(self._subscriptions)
            self._subscriptions.clear()
        return count

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    # --------------------------------------------------
    # Delivery
    # --------------------------------------------------
    def publish(self, value: T) -> int:
        """
        Deliver ``value`` to every current listener.

        Returns:
            Number of listeners that returned without raising
        """
        with self._lock:
            targets = list(self._subscriptions)

        delivered = 0
        for sub in targets:
            try:
                sub.listener(value)
                delivered += 1
            except Exception:
                logger.exception(f"[{self.name}] listener {sub!r} failed, continuing")

        if delivered != len(targets):
            logger.warning(
                f"[{self.name}] {len(targets) - delivered} of {len(targets)} listeners failed"
            )
        return delivered
