"""
statusrelay - Synchronous in-process status notifications

A single subject broadcasts named state changes through an EventRegistry
to any number of listeners, each reacting independently.
"""

from statusrelay.core.events import (
    EventRegistry,
    Listener,
    StatusLogListener,
    CallbackListener,
    Subject,
    Events,
    StatusKeys,
    NetworkConnectionStatus,
)
from statusrelay.core.network import NetworkConnectionHandler, NetworkMonitor, StatusPanel
from statusrelay.core.config import ConfigManager, AppConfig
from statusrelay.core.logging import setup_logging

__version__ = "0.1.0"

__all__ = [
    # Events
    "EventRegistry",
    "Listener",
    "StatusLogListener",
    "CallbackListener",
    "Subject",
    "Events",
    "StatusKeys",
    "NetworkConnectionStatus",

    # Network
    "NetworkConnectionHandler",
    "NetworkMonitor",
    "StatusPanel",

    # Infrastructure
    "ConfigManager",
    "AppConfig",
    "setup_logging",
]
