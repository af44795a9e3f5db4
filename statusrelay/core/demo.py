"""
Reference scenario: one network monitor, three dependent panels.

Mirrors a screen with an on/off network switch and three boxes that turn
green while connected and red otherwise. The middle box is torn down
before the monitor reports an error.
"""
from typing import Dict, List, Tuple
from loguru import logger

from .events import EventRegistry, NetworkConnectionStatus, UNKNOWN_STATUS
from .network import NetworkConnectionHandler, NetworkMonitor, StatusPanel

PANEL_NAMES = ("top", "middle", "bottom")

Step = Tuple[str, Dict[str, str]]


def _snapshot(handlers: List[NetworkConnectionHandler]) -> Dict[str, str]:
    return {h.panel.name: f"{h.current_status} ({h.panel.background_color})" for h in handlers}


def run_scenario(registry: EventRegistry, initial_status: str = UNKNOWN_STATUS) -> List[Step]:
    """
    Run the switch on / switch off / dispose / error sequence.

    Returns:
        List of (step label, {panel name: "status (color)"}) after each step
    """
    monitor = NetworkMonitor(registry)
    handlers = [
        NetworkConnectionHandler(registry, StatusPanel(name), initial_status)
        for name in PANEL_NAMES
    ]
    steps: List[Step] = [("created", _snapshot(handlers))]

    try:
        monitor.switch_changed(True)
        steps.append(("switch on", _snapshot(handlers)))

        monitor.switch_changed(False)
        steps.append(("switch off", _snapshot(handlers)))

        handlers[1].dispose()
        logger.info(f"Panel '{handlers[1].panel.name}' disposed")

        monitor.report(NetworkConnectionStatus.ERROR)
        steps.append(("error", _snapshot(handlers)))
    finally:
        for handler in handlers:
            handler.dispose()

    return steps
