"""
Event System - Synchronous Status Relay.

Provides:
- EventRegistry: subscription table and synchronous dispatch
- Listener: abstract observer that stores the last status and reacts to changes
- Subject: broadcaster that publishes status changes under one event name
- Events / StatusKeys: standard event names and payload keys

Usage:
    from statusrelay.core.events import EventRegistry, Subject, Events, StatusKeys

    registry = EventRegistry()
    subject = Subject(registry, Events.NETWORK_CONNECTION, StatusKeys.NETWORK_STATUS)
    subject.notify("connected")
"""
from .constants import Events, StatusKeys, NetworkConnectionStatus, UNKNOWN_STATUS, status_value
from .registry import EventRegistry
from .listener import Listener, StatusLogListener, CallbackListener
from .subject import Subject


__all__ = [
    "EventRegistry",
    "Listener",
    "StatusLogListener",
    "CallbackListener",
    "Subject",
    "Events",
    "StatusKeys",
    "NetworkConnectionStatus",
    "UNKNOWN_STATUS",
    "status_value",
]
