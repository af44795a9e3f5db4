"""
Subject - Broadcaster side of the status relay.

A Subject knows only its event name and payload key. It never holds
references to listeners; the registry is the sole intermediary.
"""
from loguru import logger

from .constants import status_value
from .registry import EventRegistry


class Subject:
    """
    Broadcasts status changes under one event name.

    Can be used directly or as a base class for any entity whose state
    other parts of the application depend on.

    Usage:
        class Battery(Subject):
            def __init__(self, registry):
                super().__init__(registry, Events.BATTERY_STATUS, "batteryLevelKey")

        Battery(registry).notify("low")
    """

    def __init__(self, registry: EventRegistry, event: str, key: str):
        self.registry = registry
        self.own_event = event
        self.own_key = key

    def notify(self, change_to) -> None:
        """
        Broadcast a status to every current subscriber.

        Returns once all subscribers have been processed. Listener failures
        are contained by the registry and never reach the caller.

        Args:
            change_to: New status (string or str-valued enum member)
        """
        payload = {self.own_key: status_value(change_to)}
        delivered = self.registry.publish(self.own_event, payload)
        logger.debug(f"{self.__class__.__name__} notified {self.own_event} ({delivered} listeners)")
