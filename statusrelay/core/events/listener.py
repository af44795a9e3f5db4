"""
Listener - Observer side of the status relay.

A Listener watches one payload key on one event. It subscribes itself on
construction, stores the last status it received and runs its reaction hook
after every relevant delivery.

Usage:
    class PanelListener(Listener):
        def handle_change(self):
            print(f"now {self.current_status}")

    with PanelListener(registry, Events.NETWORK_CONNECTION, StatusKeys.NETWORK_STATUS) as listener:
        ...  # unsubscribed on exit, even if the block raises
"""
from abc import ABC, abstractmethod
from typing import Callable, List, Mapping

from loguru import logger

from .constants import UNKNOWN_STATUS, status_value
from .registry import EventRegistry


class Listener(ABC):
    """
    Abstract base class for all listeners.

    Subclasses must implement handle_change(); a subclass without it cannot
    be instantiated. The registry only holds a weak reference, so the owner
    is responsible for calling dispose() (or using the listener as a
    context manager).
    """

    def __init__(self, registry: EventRegistry, event: str, key: str,
                 initial_status: str = UNKNOWN_STATUS):
        self.registry = registry
        self.watched_event = event
        self.watched_key = key
        self.current_status = initial_status
        self._disposed = False

        self.subscribe()

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(event={self.watched_event!r}, "
                f"status={self.current_status!r})")

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def subscribe(self) -> None:
        """Register with the registry for the watched event. No-op once disposed."""
        if self._disposed:
            return
        self.registry.subscribe(self.watched_event, self)

    def unsubscribe(self) -> None:
        self.registry.unsubscribe(self.watched_event, self)

    def on_notified(self, payload: Mapping[str, str]) -> bool:
        """
        Delivery entry point called by the registry.

        Updates current_status strictly before handle_change() runs.
        Payloads without the watched key, or with a non-string value under
        it, are not relevant to this listener and are ignored.

        Args:
            payload: Mapping of payload key to status value

        Returns:
            True if the reaction hook ran
        """
        if self._disposed:
            return False

        if self.watched_key not in payload:
            logger.debug(f"{self!r} ignored {self.watched_event}: no '{self.watched_key}' in payload")
            return False

        value = payload[self.watched_key]
        if not isinstance(value, str):
            logger.debug(f"{self!r} ignored {self.watched_event}: non-string status {value!r}")
            return False

        status = status_value(value)
        self.current_status = status
        self.handle_change()

        logger.debug(f"Notification {self.watched_event} received; status: {status}")
        return True

    @abstractmethod
    def handle_change(self) -> None:
        """React to a new current_status."""

    def dispose(self) -> None:
        """Unsubscribe for good. Calling it again is a no-op."""
        if self._disposed:
            return
        self._disposed = True
        self.unsubscribe()
        logger.debug(f"{self.__class__.__name__} unsubscribing from {self.watched_event}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.dispose()


class StatusLogListener(Listener):
    """Logs every status change and keeps the sequence it has seen."""

    def __init__(self, registry: EventRegistry, event: str, key: str,
                 initial_status: str = UNKNOWN_STATUS):
        self.history: List[str] = []
        super().__init__(registry, event, key, initial_status)

    def handle_change(self) -> None:
        self.history.append(self.current_status)
        logger.info(f"[{self.watched_event}] status -> {self.current_status}")


class CallbackListener(Listener):
    """
    Adapts a plain callable to the Listener contract.

    The callback receives the new status string.
    """

    def __init__(self, registry: EventRegistry, event: str, key: str,
                 callback: Callable[[str], None], initial_status: str = UNKNOWN_STATUS):
        self._callback = callback
        super().__init__(registry, event, key, initial_status)

    def handle_change(self) -> None:
        self._callback(self.current_status)
