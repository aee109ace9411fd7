"""In-process publish/subscribe with latched (retained) topics.

Delivery is synchronous: `publish` calls every subscriber in subscription order
before returning. A latched topic keeps the last message and hands it to any
subscriber that attaches later, so a one-shot publisher is still visible to
late joiners.
"""

from __future__ import annotations

import atexit
from typing import Any, Callable, Dict, List, Optional

Callback = Callable[[Any], None]


class _Topic:
    def __init__(self, name: str) -> None:
        self.name = name
        self.latch = False
        self.retained: Any = None
        self.has_retained = False
        self.callbacks: List[Callback] = []
        self.publishers = 0


class Subscription:
    def __init__(self, bus: "MessageBus", topic: str, callback: Callback) -> None:
        self._bus = bus
        self.topic = topic
        self.callback = callback
        self._active = True

    def unregister(self) -> None:
        if self._active:
            self._bus._remove_callback(self.topic, self.callback)
            self._active = False


class Publisher:
    """Handle returned by MessageBus.advertise."""

    def __init__(self, bus: "MessageBus", topic: str, latch: bool) -> None:
        self._bus = bus
        self.topic = topic
        self.latch = bool(latch)
        self._closed = False

    def publish(self, msg: Any) -> None:
        if self._closed:
            raise RuntimeError(f"publisher for '{self.topic}' has been shut down")
        self._bus._deliver(self.topic, msg, retain=self.latch)

    def get_num_connections(self) -> int:
        return self._bus.num_subscribers(self.topic)

    def shutdown(self) -> None:
        """Stop publishing and drop the retained message. Safe to call twice."""
        if not self._closed:
            self._bus._release(self.topic)
            self._closed = True


class MessageBus:
    """Registry of named topics."""

    def __init__(self) -> None:
        self._topics: Dict[str, _Topic] = {}

    def _topic(self, name: str) -> _Topic:
        if not name:
            raise ValueError("topic name must be a non-empty string")
        t = self._topics.get(name)
        if t is None:
            t = _Topic(name)
            self._topics[name] = t
        return t

    def advertise(self, name: str, latch: bool = True) -> Publisher:
        t = self._topic(name)
        t.latch = t.latch or bool(latch)
        t.publishers += 1
        return Publisher(self, name, latch)

    def subscribe(self, name: str, callback: Callback) -> Subscription:
        t = self._topic(name)
        t.callbacks.append(callback)
        if t.latch and t.has_retained:
            callback(t.retained)
        return Subscription(self, name, callback)

    def latest(self, name: str) -> Optional[Any]:
        t = self._topics.get(name)
        if t is None or not t.has_retained:
            return None
        return t.retained

    def num_subscribers(self, name: str) -> int:
        t = self._topics.get(name)
        return 0 if t is None else len(t.callbacks)

    def topics(self) -> List[str]:
        return sorted(self._topics)

    def clear(self) -> None:
        self._topics.clear()

    def _deliver(self, name: str, msg: Any, retain: bool) -> None:
        t = self._topic(name)
        if retain:
            # topic may have been dropped by clear() while the publisher lived on
            t.latch = True
            t.retained = msg
            t.has_retained = True
        # Copy so a callback may unregister itself mid-delivery
        for cb in list(t.callbacks):
            cb(msg)

    def _remove_callback(self, name: str, callback: Callback) -> None:
        t = self._topics.get(name)
        if t is not None and callback in t.callbacks:
            t.callbacks.remove(callback)

    def _release(self, name: str) -> None:
        t = self._topics.get(name)
        if t is None:
            return
        t.publishers = max(0, t.publishers - 1)
        if t.publishers == 0:
            t.retained = None
            t.has_retained = False
            t.latch = False


_DEFAULT_BUS: Optional[MessageBus] = None


def default_bus() -> MessageBus:
    """Process-wide bus, cleared at interpreter exit."""
    global _DEFAULT_BUS
    if _DEFAULT_BUS is None:
        _DEFAULT_BUS = MessageBus()
        atexit.register(_DEFAULT_BUS.clear)
    return _DEFAULT_BUS
