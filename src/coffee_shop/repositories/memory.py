"""In-memory order repository."""

from uuid import UUID

from coffee_shop.exceptions import OrderAlreadyExists, OrderNotStored
from coffee_shop.order import Order
from coffee_shop.repositories.base import OrderRepository


class MemoryOrderRepository(OrderRepository):
    """Keeps orders in a dict for the lifetime of the process."""

    def __init__(self):
        self._orders: dict[UUID, Order] = {}

    def save(self, order: Order) -> None:
        if order.id in self._orders:
            raise OrderAlreadyExists(f"Order {order.id} already exists")
        self._orders[order.id] = order.model_copy(deep=True)

    def find_by_id(self, order_id: UUID) -> Order | None:
        order = self._orders.get(order_id)
        return order.model_copy(deep=True) if order else None

    def update(self, order: Order) -> None:
        if order.id not in self._orders:
            raise OrderNotStored(f"Order {order.id} not found")
        self._orders[order.id] = order.model_copy(deep=True)

    def find_by_customer_email(self, email: str) -> list[Order]:
        return [o.model_copy(deep=True) for o in self._orders.values() if o.customer.email == email]

    def list_all(self) -> list[Order]:
        return [o.model_copy(deep=True) for o in self._orders.values()]

    def delete(self, order_id: UUID) -> bool:
        return self._orders.pop(order_id, None) is not None

    def count(self) -> int:
        return len(self._orders)

    def clear(self) -> None:
        self._orders.clear()
