"""Console notifier implementation."""

import sys
from typing import TextIO

from coffee_shop.exceptions import NotificationError
from coffee_shop.notifiers.base import Notifier
from coffee_shop.order import Order


class ConsoleNotifier(Notifier):
    """Prints notifications to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def notify_order_placed(self, order: Order) -> None:
        contact = f" ({order.customer.email})" if order.customer.email else ""
        self._write(
            [
                "Order Placed!",
                f"Order ID: {order.id}",
                f"Customer: {order.customer.name}{contact}",
                f"Items: {len(order.items)}",
                f"Total: ${order.total_price:.2f}",
                f"Status: {order.status.value}",
            ]
        )

    def notify_order_ready(self, order: Order) -> None:
        self._write(
            [
                "Order Ready for Pickup!",
                f"Order ID: {order.id}",
                f"Customer: {order.customer.name}",
                "Please come to the counter!",
            ]
        )

    def notify_order_cancelled(self, order: Order) -> None:
        self._write(
            [
                "Order Cancelled",
                f"Order ID: {order.id}",
                f"Customer: {order.customer.name}",
            ]
        )

    def _write(self, lines: list[str]) -> None:
        stream = self._stream or sys.stdout
        try:
            print(file=stream)
            for line in lines:
                print(line, file=stream)
            print(file=stream)
        except (OSError, ValueError) as e:
            raise NotificationError(f"Failed to write notification: {e}") from e
