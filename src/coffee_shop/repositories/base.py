"""Base order repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from coffee_shop.order import Order


class OrderRepository(ABC):
    """Abstract base class for order storage backends.

    Every failure is raised as a ``RepositoryError`` subclass. Each call is
    atomic with respect to a single order; nothing is guaranteed across calls.
    """

    @abstractmethod
    def save(self, order: Order) -> None:
        """Store a new order.

        Raises:
            OrderAlreadyExists: If an order with the same id is stored.
        """
        pass

    @abstractmethod
    def find_by_id(self, order_id: UUID) -> Order | None:
        """Return the stored order, or None if there is none."""
        pass

    @abstractmethod
    def update(self, order: Order) -> None:
        """Replace a stored order.

        Raises:
            OrderNotStored: If the order was never saved.
        """
        pass

    @abstractmethod
    def find_by_customer_email(self, email: str) -> list[Order]:
        pass

    @abstractmethod
    def list_all(self) -> list[Order]:
        pass

    @abstractmethod
    def delete(self, order_id: UUID) -> bool:
        """Remove an order. Returns whether it existed."""
        pass
