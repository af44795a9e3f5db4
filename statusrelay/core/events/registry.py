"""
EventRegistry - Subscription Table and Dispatch Core

Maps event names to the listeners currently subscribed to them and
delivers payloads to those listeners synchronously.

Snapshot Semantics:
- publish() copies the subscriber set under the lock, then delivers outside it
- Listeners (un)subscribed during a delivery are affected from the next publish on
- A hook may publish again from inside a delivery (re-entrant lock, not held while hooks run)
"""
import threading
from typing import TYPE_CHECKING, Dict, FrozenSet, List, Mapping, Optional
from weakref import WeakSet

from loguru import logger

if TYPE_CHECKING:
    from .listener import Listener


class EventRegistry:
    """
    Process-local pub/sub registry for status notifications.

    Registrations are weak: the registry never keeps a listener alive.
    Create one instance per application (or per test) and inject it into
    subjects and listeners.

    Usage:
        registry = EventRegistry()
        registry.subscribe("networkConnection", listener)
        registry.publish("networkConnection", {"networkStatusKey": "connected"})
    """

    def __init__(self) -> None:
        self._subscribers: Dict[str, "WeakSet[Listener]"] = {}
        self._lock = threading.RLock()

    def subscribe(self, event: str, listener: "Listener") -> None:
        """
        Subscribe a listener to an event.

        Subscribing the same listener twice has no additional effect.

        Args:
            event: Event name (e.g. "networkConnection")
            listener: Listener to deliver payloads to
        """
        with self._lock:
            listeners = self._subscribers.setdefault(event, WeakSet())
            if listener in listeners:
                return
            listeners.add(listener)
        logger.debug(f"Subscribed to {event}: {listener!r}")

    def unsubscribe(self, event: str, listener: "Listener") -> None:
        """
        Unsubscribe a listener from an event.

        Removing a listener that is not subscribed is a no-op.

        Args:
            event: Event name
            listener: Listener to remove
        """
        with self._lock:
            listeners = self._subscribers.get(event)
            if listeners is None or listener not in listeners:
                return
            listeners.discard(listener)
            if not listeners:
                del self._subscribers[event]
        logger.debug(f"Unsubscribed from {event}: {listener!r}")

    def publish(self, event: str, payload: Mapping[str, str]) -> int:
        """
        Deliver a payload to every listener subscribed to an event.

        Each listener is isolated: an exception from one hook is logged and
        the remaining listeners are still served.

        Args:
            event: Event name
            payload: Mapping of payload key to status value

        Returns:
            Number of listeners whose reaction hook ran
        """
        with self._lock:
            listeners = list(self._subscribers.get(event, ()))

        if not listeners:
            logger.debug(f"Published {event} with no subscribers")
            return 0

        delivered = 0
        for listener in listeners:
            try:
                if listener.on_notified(payload):
                    delivered += 1
            except Exception:
                logger.exception(f"Error in listener for {event}: {listener!r}")
        return delivered

    def subscribers(self, event: str) -> FrozenSet["Listener"]:
        """Snapshot of the listeners currently subscribed to an event."""
        with self._lock:
            return frozenset(self._subscribers.get(event, ()))

    def subscriber_count(self, event: str) -> int:
        with self._lock:
            return len(self._subscribers.get(event, ()))

    def is_subscribed(self, event: str, listener: "Listener") -> bool:
        with self._lock:
            listeners = self._subscribers.get(event)
            return listeners is not None and listener in listeners

    def events(self) -> List[str]:
        """Event names with at least one live subscriber."""
        with self._lock:
            return [name for name, listeners in self._subscribers.items() if len(listeners)]

    def clear(self, event: Optional[str] = None) -> None:
        """
        Drop subscriptions.

        Args:
            event: If provided, clear only that event's subscribers.
                   If None, clear every event.
        """
        with self._lock:
            if event is None:
                self._subscribers.clear()
            else:
                self._subscribers.pop(event, None)
        logger.debug(f"Registry cleared: {event or 'all events'}")
