"""Tests for the console notifier."""

import io

import pytest

from coffee_shop import Coffee, Customer, Order
from coffee_shop.exceptions import NotificationError
from coffee_shop.notifiers import ConsoleNotifier


@pytest.fixture
def order():
    return Order.create(Customer(name="Alice", email="alice@example.com"), [Coffee(), Coffee()])


def test_notify_order_placed_writes_summary(order):
    stream = io.StringIO()

    ConsoleNotifier(stream).notify_order_placed(order)

    output = stream.getvalue()
    assert "Order Placed!" in output
    assert "Customer: Alice (alice@example.com)" in output
    assert "Items: 2" in output
    assert "Total: $7.00" in output


def test_notify_order_ready_defaults_to_stdout(order, capsys):
    ConsoleNotifier().notify_order_ready(order)

    assert "Order Ready for Pickup!" in capsys.readouterr().out


def test_notify_order_cancelled(order):
    stream = io.StringIO()

    ConsoleNotifier(stream).notify_order_cancelled(order)

    assert f"Order ID: {order.id}" in stream.getvalue()


def test_closed_stream_raises_notification_error(order):
    stream = io.StringIO()
    stream.close()

    with pytest.raises(NotificationError):
        ConsoleNotifier(stream).notify_order_placed(order)
