from __future__ import annotations


def test_publish_calls_handlers_in_subscription_order():
    from aspectguard.kernel.event_bus import EventBus

    bus = EventBus()
    calls = []
    bus.subscribe("t", lambda: calls.append("first"))
    bus.subscribe("t", lambda: calls.append("second"))

    out = bus.publish("t")
    assert calls == ["first", "second"]
    assert out["ok"] is True
    assert out["handlers_called"] == 2


def test_failing_handler_is_isolated():
    from aspectguard.kernel.event_bus import EventBus

    bus = EventBus()
    calls = []

    def boom(**kwargs):
        raise RuntimeError("boom")

    bus.subscribe("t", boom)
    bus.subscribe("t", lambda **kw: calls.append(kw["x"]))

    out = bus.publish("t", x=1)
    assert out["ok"] is False
    assert out["handlers_failed"] == 1
    assert calls == [1]


def test_repeatedly_failing_handler_stays_subscribed():
    from aspectguard.kernel.event_bus import EventBus

    bus = EventBus()
    attempts = []

    def flaky():
        attempts.append(1)
        if len(attempts) <= 25:
            raise RuntimeError("capture backend hiccup")

    bus.subscribe("t", flaky)
    for _ in range(25):
        assert bus.publish("t")["handlers_failed"] == 1

    out = bus.publish("t")
    assert out["ok"] is True
    assert out["handlers_called"] == 1
    assert len(attempts) == 26


def test_unsubscribe():
    from aspectguard.kernel.event_bus import EventBus

    bus = EventBus()
    calls = []
    handler = lambda: calls.append("h")  # noqa: E731
    unsubscribe = bus.subscribe("t", handler)
    bus.subscribe("other", handler)

    bus.publish("t")
    unsubscribe()
    bus.publish("t")
    assert calls == ["h"]
    assert bus.handler_count("t") == 0
    assert bus.unsubscribe("t", handler) is False
    assert bus.unsubscribe("other", handler) is True
    assert bus.publish("nobody")["handlers_called"] == 0
