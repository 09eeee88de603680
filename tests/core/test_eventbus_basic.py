from core.eventbus import EventBus, subscribe, emit
from core import metrics


def test_eventbus_basic_dispatch():
    got = []
    unsub_a = subscribe("TestEvent", lambda p: got.append(p["value"]))
    unsub_b = subscribe("TestEvent", lambda p: got.append(p["value"] * 2))
    try:
        emit("TestEvent", {"value": 3})
    finally:
        unsub_a()
        unsub_b()
    assert sorted(got) == [3, 6]
    snap = metrics.snapshot()["counters"]
    assert any("events_emitted_total" in k for k in snap)


def test_eventbus_handler_isolation_and_unsubscribe():
    metrics.reset_for_tests()
    bus = EventBus()
    got = []

    def _boom(payload):
        raise RuntimeError("handler failure")

    bus.subscribe("E", _boom)
    unsub = bus.subscribe("E", lambda p: got.append(p))
    bus.emit("E", {"x": 1})
    assert len(got) == 1 and "ts" in got[0]
    counters = metrics.snapshot()["counters"]
    assert counters[
        "handler_exceptions_total{error_type=event-handler-error,event=E}"
    ] == 1.0

    unsub()
    bus.emit("E", {"x": 2})
    assert len(got) == 1
