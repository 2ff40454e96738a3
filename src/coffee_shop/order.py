"""Order aggregate and its lifecycle."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, model_validator

from coffee_shop.exceptions import InvalidOrder, InvalidOrderTransition
from coffee_shop.schema import Beverage, Customer, to_money


class OrderStatus(str, Enum):
    PLACED = "placed"
    PAID = "paid"
    READY = "ready"
    CANCELLED = "cancelled"


class OrderItem(BaseModel):
    """Snapshot of a beverage as it was priced when ordered."""

    beverage_name: str
    description: str
    price: Decimal = Field(ge=0)
    quantity: int = Field(default=1, ge=1)

    @classmethod
    def from_beverage(cls, beverage: Beverage, quantity: int = 1) -> OrderItem:
        return cls(
            beverage_name=beverage.name(),
            description=beverage.description(),
            price=beverage.price(),
            quantity=quantity,
        )

    def subtotal(self) -> Decimal:
        return to_money(self.price * self.quantity)


def items_total(items: list[OrderItem]) -> Decimal:
    return to_money(sum((item.subtotal() for item in items), Decimal("0")))


class Order(BaseModel):
    """A customer's beverage purchase.

    Items keep the order they were added in. ``total_price`` always equals the
    sum of item subtotals; it is derived when omitted and checked otherwise.
    Both invariants raise ``InvalidOrder``.
    """

    id: UUID = Field(default_factory=uuid4)
    customer: Customer
    items: list[OrderItem]
    total_price: Decimal = Decimal("0")
    status: OrderStatus = OrderStatus.PLACED
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    payment_id: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _require_items(cls, data):
        if isinstance(data, dict) and not data.get("items"):
            raise InvalidOrder("Order must contain at least one item")
        return data

    @model_validator(mode="after")
    def _check_total(self) -> Order:
        expected = items_total(self.items)
        if "total_price" not in self.model_fields_set:
            self.total_price = expected
        elif to_money(self.total_price) != expected:
            raise InvalidOrder(f"total_price {self.total_price} does not match item sum {expected}")
        return self

    @classmethod
    def create(cls, customer: Customer, beverages: list[Beverage], total_price: Decimal | None = None) -> Order:
        items = [OrderItem.from_beverage(beverage) for beverage in beverages]
        if total_price is None:
            return cls(customer=customer, items=items)
        return cls(customer=customer, items=items, total_price=total_price)

    def add_beverage(self, beverage: Beverage, quantity: int = 1) -> None:
        """Append a line item and recompute the total. Only allowed while placed."""
        if self.status is not OrderStatus.PLACED:
            raise InvalidOrderTransition(f"Cannot add items to a {self.status.value} order")
        self.items.append(OrderItem.from_beverage(beverage, quantity))
        self.total_price = items_total(self.items)

    def mark_paid(self, payment_id: str) -> None:
        self._transition(OrderStatus.PAID, allowed_from={OrderStatus.PLACED})
        self.payment_id = payment_id

    def mark_ready(self) -> None:
        self._transition(OrderStatus.READY, allowed_from={OrderStatus.PAID})

    def cancel(self) -> None:
        self._transition(
            OrderStatus.CANCELLED,
            allowed_from={OrderStatus.PLACED, OrderStatus.PAID, OrderStatus.READY},
        )

    def _transition(self, target: OrderStatus, allowed_from: set[OrderStatus]) -> None:
        if self.status not in allowed_from:
            raise InvalidOrderTransition(
                f"Order {self.id} cannot move from {self.status.value} to {target.value}"
            )
        self.status = target
