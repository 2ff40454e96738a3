"""Order workflow orchestration."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from uuid import UUID

from coffee_shop.exceptions import (
    InvalidOrder,
    NotificationError,
    NotificationFailed,
    OrderNotFound,
    PaymentError,
    PaymentFailed,
    PersistenceFailed,
    RepositoryError,
)
from coffee_shop.notifiers.base import Notifier
from coffee_shop.order import Order
from coffee_shop.payments.base import PaymentProcessor
from coffee_shop.pricing import PricingCalculator
from coffee_shop.repositories.base import OrderRepository
from coffee_shop.schema import Beverage, Customer

logger = logging.getLogger(__name__)


class OrderService:
    """Places and tracks orders through injected collaborators.

    The service only coordinates: prices come from the calculator, storage from
    the repository, charges from the payment processor and messages from the
    notifier. Any adapter honouring those contracts can be swapped in.
    """

    def __init__(
        self,
        repository: OrderRepository,
        payment_processor: PaymentProcessor,
        notifier: Notifier,
        *,
        pricing: PricingCalculator | None = None,
        strict_notifications: bool = False,
    ):
        """Initialize the service.

        Args:
            repository: Order storage backend.
            payment_processor: Payment method used for every order.
            notifier: Channel for customer messages.
            pricing: Calculator for order totals. Defaults to a tax-free one.
            strict_notifications: Raise NotificationFailed instead of logging
                and continuing when a notification cannot be sent.
        """
        self.repository = repository
        self.payment_processor = payment_processor
        self.notifier = notifier
        self.pricing = pricing or PricingCalculator()
        self.strict_notifications = strict_notifications

    def place_order(self, customer: Customer, beverages: Sequence[Beverage]) -> Order:
        """Validate, price, store, charge and announce a new order.

        Returns:
            The stored order in PAID status.

        Raises:
            InvalidOrder: If the customer is missing or there are no beverages.
                No collaborator is called.
            PersistenceFailed: If the order cannot be stored. Nothing is charged
                when the initial save fails.
            PaymentFailed: If the charge fails. The stored order stays PLACED.
        """
        self._validate(customer, beverages)

        total = self.pricing.calculate_total(beverages)
        order = Order.create(customer, list(beverages), total_price=total)

        try:
            self.repository.save(order)
        except RepositoryError as e:
            raise PersistenceFailed(f"Storage failed: {e}") from e
        logger.info("order %s placed for %s, total %.2f", order.id, customer.name, total)

        try:
            payment_id = self.payment_processor.process_payment(total)
        except PaymentError as e:
            logger.warning("payment for order %s failed, order left placed: %s", order.id, e)
            raise PaymentFailed(f"Payment failed: {e}") from e

        order.mark_paid(payment_id)
        try:
            self.repository.update(order)
        except RepositoryError as e:
            logger.error("order %s charged as %s but could not be stored as paid: %s", order.id, payment_id, e)
            raise PersistenceFailed(f"Storage failed: {e}") from e
        logger.info("order %s paid via %s: %s", order.id, self.payment_processor.method_name, payment_id)

        self._notify(self.notifier.notify_order_placed, order)
        return order

    def get_order(self, order_id: UUID) -> Order:
        try:
            order = self.repository.find_by_id(order_id)
        except RepositoryError as e:
            raise PersistenceFailed(f"Storage failed: {e}") from e
        if order is None:
            raise OrderNotFound(f"Order {order_id} not found")
        return order

    def list_customer_orders(self, email: str) -> list[Order]:
        try:
            return self.repository.find_by_customer_email(email)
        except RepositoryError as e:
            raise PersistenceFailed(f"Storage failed: {e}") from e

    def list_all_orders(self) -> list[Order]:
        try:
            return self.repository.list_all()
        except RepositoryError as e:
            raise PersistenceFailed(f"Storage failed: {e}") from e

    def mark_order_ready(self, order_id: UUID) -> Order:
        """Move a paid order to READY and tell the customer."""
        order = self.get_order(order_id)
        order.mark_ready()
        self._update(order)
        logger.info("order %s ready", order.id)
        self._notify(self.notifier.notify_order_ready, order)
        return order

    def cancel_order(self, order_id: UUID) -> Order:
        """Cancel an order. Refunds are left to the payment provider."""
        order = self.get_order(order_id)
        order.cancel()
        self._update(order)
        logger.info("order %s cancelled", order.id)
        self._notify(self.notifier.notify_order_cancelled, order)
        return order

    @staticmethod
    def _validate(customer: Customer, beverages: Sequence[Beverage]) -> None:
        if customer is None:
            raise InvalidOrder("Order must have a customer")
        if not isinstance(customer, Customer):
            raise InvalidOrder(f"Expected a Customer, got {type(customer).__name__}")
        if not beverages:
            raise InvalidOrder("Order must contain at least one item")
        for beverage in beverages:
            if not isinstance(beverage, Beverage):
                raise InvalidOrder(f"Expected a Beverage, got {type(beverage).__name__}")

    def _update(self, order: Order) -> None:
        try:
            self.repository.update(order)
        except RepositoryError as e:
            raise PersistenceFailed(f"Storage failed: {e}") from e

    def _notify(self, send, order: Order) -> None:
        try:
            send(order)
        except NotificationError as e:
            if self.strict_notifications:
                raise NotificationFailed(f"Notification failed: {e}") from e
            logger.warning("notification for order %s failed: %s", order.id, e)
