# -*- coding: utf-8 -*-
"""
tests/test_notifier.py
======================
StateNotifier delivery order, isolation and membership.
"""
import logging

import pytest

from core.notifier import StateNotifier


class TestDelivery:

    def test_subscription_order(self):
        notifier = StateNotifier()
        calls = []
        notifier.subscribe(lambda v: calls.append(("a", v)))
        notifier.subscribe(lambda v: calls.append(("b", v)))
        notifier.subscribe(lambda v: calls.append(("c", v)))

        notifier.publish(1)
        assert calls == [("a", 1), ("b", 1), ("c", 1)]

    def test_exactly_once_per_publish(self):
        notifier = StateNotifier()
        calls = []
        notifier.subscribe(calls.append)
        notifier.publish("x")
        notifier.publish("y")
        assert calls == ["x", "y"]

    def test_returns_delivered_count(self):
        notifier = StateNotifier()
        notifier.subscribe(lambda v: None)
        notifier.subscribe(lambda v: None)
        assert notifier.publish(0) == 2

    def test_no_listeners(self):
        assert StateNotifier().publish(0) == 0


class TestListenerIsolation:

    def test_failure_does_not_stop_later_listeners(self, caplog):
        notifier = StateNotifier("test")
        calls = []

        def broken(_):
            raise RuntimeError("boom")

        notifier.subscribe(calls.append)
        notifier.subscribe(broken)
        notifier.subscribe(calls.append)

        with caplog.at_level(logging.ERROR, logger="core.notifier"):
            delivered = notifier.publish(7)

        assert calls == [7, 7]
        assert delivered == 2
        assert "boom" in caplog.text

    def test_failure_not_raised_to_publisher(self):
        notifier = StateNotifier()
        notifier.subscribe(lambda v: 1 / 0)
        notifier.publish(None)  # must not raise


class TestMembership:

    def test_cancel(self):
        notifier = StateNotifier()
        calls = []
        sub = notifier.subscribe(calls.append)
        assert sub.active
        assert sub.cancel() is True
        assert not sub.active
        notifier.publish(1)
        assert calls == []

    def test_unsubscribe_twice(self):
        notifier = StateNotifier()
        sub = notifier.subscribe(lambda v: None)
        assert notifier.unsubscribe(sub) is True
        assert notifier.unsubscribe(sub) is False

    def test_same_callable_twice_gets_two_handles(self):
        notifier = StateNotifier()
        calls = []
        first = notifier.subscribe(calls.append)
        second = notifier.subscribe(calls.append)
        assert first is not second
        notifier.publish(1)
        assert calls == [1, 1]
        first.cancel()
        notifier.publish(2)
        assert calls == [1, 1, 2]

    def test_unsubscribe_during_publish_applies_next_time(self):
        notifier = StateNotifier()
        calls = []
        handles = {}

        def first(v):
            calls.append(("first", v))
            handles["second"].cancel()

        notifier.subscribe(first)
        handles["second"] = notifier.subscribe(lambda v: calls.append(("second", v)))

        notifier.publish(1)
        notifier.publish(2)
        assert calls == [("first", 1), ("second", 1), ("first", 2)]

    def test_subscribe_during_publish_applies_next_time(self):
        notifier = StateNotifier()
        calls = []

        def first(v):
            calls.append(("first", v))
            if v == 1:
                notifier.subscribe(lambda x: calls.append(("late", x)))

        notifier.subscribe(first)
        notifier.publish(1)
        notifier.publish(2)
        assert calls == [("first", 1), ("first", 2), ("late", 2)]

    def test_clear(self):
        notifier = StateNotifier()
        notifier.subscribe(lambda v: None)
        notifier.subscribe(lambda v: None)
        assert notifier.clear() == 2
        assert notifier.listener_count == 0

    def test_non_callable_rejected(self):
        with pytest.raises(TypeError):
            StateNotifier().subscribe("not callable")
