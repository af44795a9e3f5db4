"""
Network connectivity relay.

A NetworkMonitor stands in for the critical resource (network reachability)
and broadcasts its state; NetworkConnectionHandler instances recolour the
panel they own whenever that state changes.
"""
from dataclasses import dataclass

from .events import (
    EventRegistry,
    Events,
    Listener,
    NetworkConnectionStatus,
    StatusKeys,
    Subject,
    UNKNOWN_STATUS,
)

CONNECTED_COLOR = "green"
DISCONNECTED_COLOR = "red"


@dataclass
class StatusPanel:
    """Plain stand-in for a view whose background reflects a status."""
    name: str
    background_color: str = "white"


class NetworkConnectionHandler(Listener):
    """Colours its panel green while connected, red in any other state."""

    def __init__(self, registry: EventRegistry, panel: StatusPanel,
                 initial_status: str = UNKNOWN_STATUS):
        self.panel = panel
        super().__init__(
            registry,
            Events.NETWORK_CONNECTION,
            StatusKeys.NETWORK_STATUS,
            initial_status,
        )

    def handle_change(self) -> None:
        if self.current_status == NetworkConnectionStatus.CONNECTED.value:
            self.panel.background_color = CONNECTED_COLOR
        else:
            self.panel.background_color = DISCONNECTED_COLOR


class NetworkMonitor(Subject):
    """Broadcasts network connectivity changes."""

    def __init__(self, registry: EventRegistry):
        super().__init__(registry, Events.NETWORK_CONNECTION, StatusKeys.NETWORK_STATUS)

    def switch_changed(self, is_on: bool) -> None:
        """Translate an on/off control into connected/disconnected."""
        if is_on:
            self.notify(NetworkConnectionStatus.CONNECTED)
        else:
            self.notify(NetworkConnectionStatus.DISCONNECTED)

    def report(self, status: NetworkConnectionStatus) -> None:
        """Broadcast any state from the closed status set."""
        self.notify(NetworkConnectionStatus(status))
