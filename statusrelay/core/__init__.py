"""
statusrelay Core - Notification Infrastructure.

Provides:
- EventRegistry: subscription table and synchronous dispatch
- Listener / Subject: observer and broadcaster building blocks
- ConfigManager: settings with persistence
- setup_logging: loguru console/file sinks

Usage:
    from statusrelay.core import EventRegistry, NetworkMonitor, NetworkConnectionHandler, StatusPanel

    registry = EventRegistry()
    handler = NetworkConnectionHandler(registry, StatusPanel("top"))
    NetworkMonitor(registry).switch_changed(True)
"""
from .events import (
    EventRegistry,
    Listener,
    StatusLogListener,
    CallbackListener,
    Subject,
    Events,
    StatusKeys,
    NetworkConnectionStatus,
)
from .network import NetworkConnectionHandler, NetworkMonitor, StatusPanel
from .config import ConfigManager, AppConfig, GeneralSettings, ListenerSettings
from .logging import setup_logging

__all__ = [
    "EventRegistry",
    "Listener",
    "StatusLogListener",
    "CallbackListener",
    "Subject",
    "Events",
    "StatusKeys",
    "NetworkConnectionStatus",
    "NetworkConnectionHandler",
    "NetworkMonitor",
    "StatusPanel",
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "ListenerSettings",
    "setup_logging",
]
