"""
Listener - Unit Tests

Tests for the observer side covering:
- Construction and the abstract reaction hook
- Delivery, including payloads that are not relevant to the listener
- Disposal and scoped release
- Built-in listener variants
"""
import pytest

from statusrelay.core.events import (
    CallbackListener,
    Events,
    Listener,
    NetworkConnectionStatus,
    StatusKeys,
    StatusLogListener,
)

NET = Events.NETWORK_CONNECTION
KEY = StatusKeys.NETWORK_STATUS


class TestListenerConstruction:
    """A new listener is subscribed and holds the sentinel status."""

    def test_starts_with_sentinel_and_subscribes(self, registry, make_listener):
        """Fields are set and the registry knows the listener right away."""
        listener = make_listener()

        assert listener.current_status == "N/A"
        assert listener.watched_event == NET
        assert listener.watched_key == KEY
        assert registry.is_subscribed(NET, listener)
        assert not listener.is_disposed

    def test_custom_initial_status(self, make_listener):
        """The sentinel can be overridden per listener."""
        listener = make_listener(initial_status="unknown")
        assert listener.current_status == "unknown"

    def test_missing_hook_cannot_be_instantiated(self, registry):
        """A listener without handle_change() is rejected at construction."""
        class Incomplete(Listener):
            pass

        with pytest.raises(TypeError):
            Incomplete(registry, NET, KEY)

        assert registry.subscriber_count(NET) == 0


class TestListenerDelivery:
    """on_notified() updates state, then runs the hook."""

    def test_status_updated_before_hook(self, registry):
        """The hook already sees the new current_status."""
        observed = []
        listener = CallbackListener(registry, NET, KEY, lambda status: observed.append(listener.current_status))

        listener.on_notified({KEY: "connecting"})

        assert observed == ["connecting"]
        listener.dispose()

    def test_on_notified_reports_hook_run(self, make_listener):
        """Return value tells whether the hook ran."""
        listener = make_listener()

        assert listener.on_notified({KEY: "connected"}) is True
        assert listener.on_notified({"otherKey": "connected"}) is False
        assert listener.seen == ["connected"]

    def test_enum_status_is_unwrapped(self, make_listener):
        """Members of the status enum are stored as their plain value."""
        listener = make_listener()

        assert listener.on_notified({KEY: NetworkConnectionStatus.DISCONNECTING}) is True

        assert listener.current_status == "disconnecting"

    @pytest.mark.parametrize("value", [None, 1, b"connected", ["connected"]])
    def test_non_string_status_is_ignored(self, registry, make_listener, value):
        """A malformed value under the watched key is a no-op delivery."""
        listener = make_listener()

        delivered = registry.publish(NET, {KEY: value})

        assert delivered == 0
        assert listener.current_status == "N/A"
        assert listener.calls == 0

    def test_malformed_payload_only_affects_that_listener(self, registry, make_listener):
        """Other listeners of the same publish are still served."""
        network = make_listener()
        battery = make_listener(key="batteryLevelKey")

        delivered = registry.publish(NET, {KEY: None, "batteryLevelKey": "low"})

        assert delivered == 1
        assert network.current_status == "N/A"
        assert battery.current_status == "low"

    def test_each_publish_runs_hook_once(self, registry, make_listener):
        """Consecutive publishes are all seen, in order, once each."""
        listener = make_listener()

        for status in ("connecting", "connected", "disconnected"):
            registry.publish(NET, {KEY: status})

        assert listener.seen == ["connecting", "connected", "disconnected"]


class TestListenerDisposal:
    """dispose() removes the listener for good."""

    def test_dispose_unsubscribes(self, registry, make_listener):
        """The registry no longer holds a disposed listener."""
        listener = make_listener()

        listener.dispose()

        assert listener.is_disposed
        assert not registry.is_subscribed(NET, listener)

    def test_dispose_twice(self, registry, make_listener):
        """A second dispose() is a no-op."""
        listener = make_listener()

        listener.dispose()
        # Should not raise exception
        listener.dispose()

        assert registry.subscriber_count(NET) == 0

    def test_subscribe_after_dispose(self, registry, make_listener):
        """A disposed listener cannot re-enter the registry."""
        listener = make_listener()
        listener.dispose()

        listener.subscribe()

        assert not registry.is_subscribed(NET, listener)
        assert registry.subscriber_count(NET) == 0
        assert registry.publish(NET, {KEY: "connected"}) == 0
        assert listener.current_status == "N/A"

    def test_disposed_listener_ignores_delivery(self, make_listener):
        """Even a delivery from an earlier snapshot is dropped after dispose."""
        listener = make_listener()
        listener.dispose()

        assert listener.on_notified({KEY: "error"}) is False
        assert listener.current_status == "N/A"
        assert listener.calls == 0

    def test_context_manager_disposes(self, registry, make_listener):
        """Leaving the with block disposes the listener."""
        with make_listener() as listener:
            registry.publish(NET, {KEY: "connected"})
            assert registry.is_subscribed(NET, listener)

        assert listener.is_disposed
        assert registry.subscriber_count(NET) == 0

    def test_context_manager_disposes_on_error(self, registry, make_listener):
        """The with block also disposes when it exits through an exception."""
        with pytest.raises(RuntimeError):
            with make_listener() as listener:
                raise RuntimeError("teardown path")

        assert listener.is_disposed
        assert registry.subscriber_count(NET) == 0

    def test_resubscribe_after_unsubscribe(self, registry, make_listener):
        """unsubscribe() without dispose() can be undone."""
        listener = make_listener()
        listener.unsubscribe()
        registry.publish(NET, {KEY: "connected"})

        listener.subscribe()
        registry.publish(NET, {KEY: "error"})

        assert listener.seen == ["error"]


class TestListenerVariants:
    """Ready-made listener implementations."""

    def test_status_log_listener_history(self, registry, caplog):
        """StatusLogListener keeps every status and logs it."""
        listener = StatusLogListener(registry, NET, KEY)

        registry.publish(NET, {KEY: "connected"})
        registry.publish(NET, {KEY: "error"})

        assert listener.history == ["connected", "error"]
        assert "[networkConnection] status -> error" in caplog.text
        listener.dispose()

    def test_callback_listener(self, registry):
        """CallbackListener passes the new status to its callable."""
        received = []
        listener = CallbackListener(registry, Events.LOCATION_CHANGE, "locationKey", received.append)

        registry.publish(Events.LOCATION_CHANGE, {"locationKey": "home"})

        assert received == ["home"]
        assert listener.current_status == "home"
        listener.dispose()

    def test_repr_names_event_and_status(self, make_listener):
        """repr() is what the registry logs."""
        listener = make_listener()
        assert repr(listener) == "RecordingListener(event='networkConnection', status='N/A')"
