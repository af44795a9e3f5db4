"""
Event Name and Payload Key Constants.

Well-known notification channels and the payload keys they carry.
Use these constants with EventRegistry instead of string literals.

Usage:
    from statusrelay.core.events import Events, StatusKeys

    registry.publish(Events.NETWORK_CONNECTION, {StatusKeys.NETWORK_STATUS: "connected"})
"""
from enum import Enum


class Events:
    """
    Standard event names for EventRegistry.

    Each name identifies one notification channel; equality is by value.
    """

    NETWORK_CONNECTION = "networkConnection"
    BATTERY_STATUS = "batteryStatus"
    LOCATION_CHANGE = "locationChange"


class StatusKeys:
    """Keys into the payload mapping delivered with a notification."""

    NETWORK_STATUS = "networkStatusKey"


class NetworkConnectionStatus(str, Enum):
    """Closed set of states shared by network subjects and listeners."""
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    DISCONNECTING = "disconnecting"
    ERROR = "error"


# Status held by a listener before its first delivery
UNKNOWN_STATUS = "N/A"


def status_value(value) -> str:
    """Plain string form of a status, unwrapping enum members."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
