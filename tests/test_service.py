"""Tests for the order workflow."""

import logging
from decimal import Decimal
from uuid import uuid4

import pytest

from coffee_shop import Coffee, Customer, OrderService, OrderStatus, Size, Tea
from coffee_shop.exceptions import (
    InvalidOrder,
    InvalidOrderTransition,
    NotificationError,
    NotificationFailed,
    OrderNotFound,
    OrderNotStored,
    PaymentFailed,
    PaymentProcessingError,
    PersistenceFailed,
    StorageWriteError,
)
from coffee_shop.notifiers import Notifier
from coffee_shop.payments import PaymentProcessor
from coffee_shop.repositories import JsonOrderRepository, MemoryOrderRepository, OrderRepository


@pytest.fixture
def customer():
    return Customer(name="Alice", email="alice@example.com")


@pytest.fixture
def payment(mocker):
    processor = mocker.create_autospec(PaymentProcessor, instance=True)
    processor.method_name = "Test"
    processor.process_payment.return_value = "PAY-1"
    return processor


@pytest.fixture
def notifier(mocker):
    return mocker.create_autospec(Notifier, instance=True)


@pytest.fixture
def repository():
    return MemoryOrderRepository()


@pytest.fixture
def service(repository, payment, notifier):
    return OrderService(repository, payment, notifier)


def test_place_order_example(service, repository, payment, notifier, customer):
    beverages = [
        Coffee(size=Size.MEDIUM, base_price="3.00"),
        Tea(size=Size.LARGE, base_price="2.50"),
    ]

    order = service.place_order(customer, beverages)

    assert order.total_price == Decimal("5.50")
    assert order.status == OrderStatus.PAID
    assert order.payment_id == "PAY-1"
    payment.process_payment.assert_called_once_with(Decimal("5.50"))
    notifier.notify_order_placed.assert_called_once_with(order)

    stored = repository.find_by_id(order.id)
    assert stored.status == OrderStatus.PAID
    assert stored.total_price == Decimal("5.50")
    assert [item.beverage_name for item in stored.items] == ["Coffee", "Black Tea"]


def test_place_order_empty_fails_without_side_effects(mocker, payment, notifier, customer):
    repo = mocker.create_autospec(OrderRepository, instance=True)
    service = OrderService(repo, payment, notifier)

    with pytest.raises(InvalidOrder):
        service.place_order(customer, [])

    assert repo.mock_calls == []
    payment.process_payment.assert_not_called()
    notifier.notify_order_placed.assert_not_called()


def test_place_order_missing_customer_fails(service, payment):
    with pytest.raises(InvalidOrder):
        service.place_order(None, [Coffee()])
    payment.process_payment.assert_not_called()


def test_place_order_rejects_non_beverage(service, customer, payment):
    with pytest.raises(InvalidOrder):
        service.place_order(customer, [Coffee(), "espresso"])
    payment.process_payment.assert_not_called()


def test_repository_failure_skips_payment(mocker, payment, notifier, customer):
    repo = mocker.create_autospec(OrderRepository, instance=True)
    repo.save.side_effect = StorageWriteError("disk full")
    service = OrderService(repo, payment, notifier)

    with pytest.raises(PersistenceFailed) as exc_info:
        service.place_order(customer, [Coffee()])

    assert isinstance(exc_info.value.__cause__, StorageWriteError)
    payment.process_payment.assert_not_called()
    notifier.notify_order_placed.assert_not_called()


def test_payment_failure_leaves_order_placed(service, repository, payment, notifier, customer):
    payment.process_payment.side_effect = PaymentProcessingError("gateway down")

    with pytest.raises(PaymentFailed):
        service.place_order(customer, [Coffee()])

    stored = repository.list_all()
    assert len(stored) == 1
    assert stored[0].status == OrderStatus.PLACED
    assert stored[0].payment_id is None
    notifier.notify_order_placed.assert_not_called()


def test_update_failure_after_payment_raises(mocker, payment, notifier, customer, caplog):
    repo = mocker.create_autospec(OrderRepository, instance=True)
    repo.update.side_effect = OrderNotStored("gone")
    service = OrderService(repo, payment, notifier)

    with caplog.at_level(logging.ERROR, logger="coffee_shop.service"):
        with pytest.raises(PersistenceFailed):
            service.place_order(customer, [Coffee()])

    payment.process_payment.assert_called_once()
    assert "could not be stored as paid" in caplog.text


def test_notification_failure_is_not_fatal(service, repository, notifier, customer, caplog):
    notifier.notify_order_placed.side_effect = NotificationError("smtp down")

    with caplog.at_level(logging.WARNING, logger="coffee_shop.service"):
        order = service.place_order(customer, [Coffee()])

    assert order.status == OrderStatus.PAID
    assert repository.find_by_id(order.id).status == OrderStatus.PAID
    assert "notification" in caplog.text


def test_strict_notifications_raise(repository, payment, notifier, customer):
    notifier.notify_order_placed.side_effect = NotificationError("smtp down")
    service = OrderService(repository, payment, notifier, strict_notifications=True)

    with pytest.raises(NotificationFailed):
        service.place_order(customer, [Coffee()])

    assert repository.list_all()[0].status == OrderStatus.PAID


def test_repository_adapters_are_substitutable(tmp_path, payment, notifier, customer):
    beverages = [Coffee(size=Size.SMALL, extra_shots=1), Tea(variety="Green", extras=["sugar"])]
    results = []
    for repo in (MemoryOrderRepository(), JsonOrderRepository(tmp_path / "orders.json")):
        service = OrderService(repo, payment, notifier)
        order = service.place_order(customer, beverages)
        results.append(repo.find_by_id(order.id).model_dump(exclude={"id", "created_at"}))

    assert results[0] == results[1]


def test_get_order_not_found(service):
    with pytest.raises(OrderNotFound):
        service.get_order(uuid4())


def test_list_customer_orders(service, customer):
    service.place_order(customer, [Coffee()])
    service.place_order(Customer(name="Bob", email="bob@example.com"), [Tea()])

    orders = service.list_customer_orders("alice@example.com")

    assert len(orders) == 1
    assert orders[0].customer.name == "Alice"
    assert len(service.list_all_orders()) == 2


def test_mark_order_ready_notifies(service, repository, notifier, customer):
    order = service.place_order(customer, [Coffee()])

    ready = service.mark_order_ready(order.id)

    assert ready.status == OrderStatus.READY
    assert repository.find_by_id(order.id).status == OrderStatus.READY
    notifier.notify_order_ready.assert_called_once_with(ready)


def test_mark_order_ready_requires_paid_order(service, repository, payment, customer):
    payment.process_payment.side_effect = PaymentProcessingError("declined")
    with pytest.raises(PaymentFailed):
        service.place_order(customer, [Coffee()])
    order = repository.list_all()[0]

    with pytest.raises(InvalidOrderTransition):
        service.mark_order_ready(order.id)


def test_cancel_order_after_failed_payment(service, repository, payment, notifier, customer):
    payment.process_payment.side_effect = PaymentProcessingError("declined")
    with pytest.raises(PaymentFailed):
        service.place_order(customer, [Coffee()])
    order = repository.list_all()[0]

    cancelled = service.cancel_order(order.id)

    assert cancelled.status == OrderStatus.CANCELLED
    assert repository.find_by_id(order.id).status == OrderStatus.CANCELLED
    notifier.notify_order_cancelled.assert_called_once_with(cancelled)


def test_cancel_unknown_order(service):
    with pytest.raises(OrderNotFound):
        service.cancel_order(uuid4())
