"""Testes do EventChannel."""

from __future__ import annotations

import pytest

from api.connectors.steadfast.constants import WebhookEvent
from api.connectors.steadfast.webhook.events import EventChannel


def test_emit_calls_listeners_in_order() -> None:
    channel = EventChannel()
    calls: list[str] = []
    channel.subscribe("evt", lambda value: calls.append(f"a:{value}"))
    channel.subscribe("evt", lambda value: calls.append(f"b:{value}"))

    assert channel.emit("evt", 1) == 2
    assert calls == ["a:1", "b:1"]


def test_emit_without_listeners_returns_zero() -> None:
    assert EventChannel().emit("nobody") == 0


def test_duplicate_subscription_called_twice() -> None:
    channel = EventChannel()
    calls: list[int] = []
    listener = channel.subscribe("evt", calls.append)
    channel.subscribe("evt", listener)

    channel.emit("evt", 7)

    assert calls == [7, 7]
    assert channel.listener_count("evt") == 2


def test_unsubscribe_removes_first_registration() -> None:
    channel = EventChannel()
    calls: list[int] = []
    channel.subscribe("evt", calls.append)
    channel.subscribe("evt", calls.append)

    assert channel.unsubscribe("evt", calls.append) is True
    channel.emit("evt", 1)

    assert calls == [1]


def test_unsubscribe_unknown_listener() -> None:
    channel = EventChannel()
    assert channel.unsubscribe("evt", print) is False
    channel.subscribe("evt", len)
    assert channel.unsubscribe("evt", print) is False


def test_listener_can_unsubscribe_during_emit() -> None:
    channel = EventChannel()
    calls: list[str] = []

    def once(_: object) -> None:
        calls.append("once")
        channel.unsubscribe("evt", once)

    channel.subscribe("evt", once)
    channel.subscribe("evt", lambda _: calls.append("always"))

    channel.emit("evt", None)
    channel.emit("evt", None)

    assert calls == ["once", "always", "always"]


def test_enum_and_string_keys_are_equivalent() -> None:
    channel = EventChannel()
    calls: list[object] = []
    channel.subscribe(WebhookEvent.ERROR, calls.append)

    channel.emit("steadfast_webhook_error", "boom")

    assert calls == ["boom"]


def test_listener_exception_propagates() -> None:
    channel = EventChannel()

    def broken(_: object) -> None:
        raise RuntimeError("listener failed")

    channel.subscribe("evt", broken)
    with pytest.raises(RuntimeError, match="listener failed"):
        channel.emit("evt", None)


def test_clear() -> None:
    channel = EventChannel()
    channel.subscribe("a", len)
    channel.subscribe("b", len)

    channel.clear("a")
    assert channel.listener_count("a") == 0
    assert channel.listener_count("b") == 1

    channel.clear()
    assert channel.listener_count("b") == 0
