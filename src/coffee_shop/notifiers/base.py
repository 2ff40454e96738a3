"""Base notifier interface."""

from abc import ABC, abstractmethod

from coffee_shop.order import Order


class Notifier(ABC):
    """Abstract base class for customer notification channels."""

    @abstractmethod
    def notify_order_placed(self, order: Order) -> None:
        """Tell the customer their order was placed and paid.

        Raises:
            NotificationError: If the message cannot be delivered.
        """
        pass

    @abstractmethod
    def notify_order_ready(self, order: Order) -> None:
        pass

    @abstractmethod
    def notify_order_cancelled(self, order: Order) -> None:
        pass
