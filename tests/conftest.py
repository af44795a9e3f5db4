import sys

import pytest
from loguru import logger

from statusrelay.core.events import EventRegistry, Events, Listener, StatusKeys


class RecordingListener(Listener):
    """Listener that records the status seen by each hook call."""

    def __init__(self, registry, event, key, **kwargs):
        self.seen = []
        super().__init__(registry, event, key, **kwargs)

    @property
    def calls(self):
        return len(self.seen)

    def handle_change(self):
        self.seen.append(self.current_status)


@pytest.fixture
def registry():
    """Fresh registry per test; no shared global state."""
    registry = EventRegistry()
    yield registry
    registry.clear()


@pytest.fixture
def make_listener(registry):
    """Factory for recording listeners; keeps them alive for the test."""
    created = []

    def factory(event=Events.NETWORK_CONNECTION, key=StatusKeys.NETWORK_STATUS, **kwargs):
        listener = RecordingListener(registry, event, key, **kwargs)
        created.append(listener)
        return listener

    yield factory
    for listener in created:
        listener.dispose()


@pytest.fixture
def caplog(caplog):
    """Route loguru records into pytest's caplog."""
    handler_id = logger.add(
        caplog.handler,
        format="{message}",
        level=0,
        filter=lambda record: record["level"].no >= caplog.handler.level,
        enqueue=False,
    )
    yield caplog
    logger.remove(handler_id)


@pytest.fixture
def restore_logger():
    """Undo handler changes made by setup_logging()."""
    yield
    logger.remove()
    logger.add(lambda message: sys.stderr.write(message))
