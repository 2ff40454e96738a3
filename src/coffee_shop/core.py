"""Service wiring."""

from pathlib import Path

from coffee_shop.config import ShopConfig
from coffee_shop.notifiers.base import Notifier
from coffee_shop.notifiers.console import ConsoleNotifier
from coffee_shop.payments.base import PaymentProcessor
from coffee_shop.pricing import PricingCalculator
from coffee_shop.repositories.base import OrderRepository
from coffee_shop.service import OrderService


def _build_memory_repository() -> OrderRepository:
    from coffee_shop.repositories.memory import MemoryOrderRepository

    return MemoryOrderRepository()


def _build_json_repository(path: str | Path) -> OrderRepository:
    from coffee_shop.repositories.json_file import JsonOrderRepository

    return JsonOrderRepository(path)


def _select_repository(storage: str | None, orders_file: str | Path | None, config: ShopConfig) -> OrderRepository:
    storage_name = (storage or config.storage).strip().lower()
    if storage_name in {"memory", "in-memory", "in_memory"}:
        return _build_memory_repository()
    if storage_name in {"json", "file"}:
        return _build_json_repository(orders_file or config.orders_file)
    raise ValueError(f"Unsupported storage: {storage_name}")


def _select_payment(payment: str | None, config: ShopConfig) -> PaymentProcessor:
    payment_name = (payment or config.payment).strip().lower()
    if payment_name == "cash":
        from coffee_shop.payments.cash import CashPayment

        return CashPayment()
    if payment_name in {"credit_card", "credit-card", "card"}:
        from coffee_shop.payments.credit_card import CreditCardPayment

        return CreditCardPayment(gateway_url=config.card_gateway_url, card_limit=config.card_limit)
    raise ValueError(f"Unsupported payment method: {payment_name}")


def build_order_service(
    *,
    storage: str | None = None,
    payment: str | None = None,
    orders_file: str | Path | None = None,
    notifier: Notifier | None = None,
    config: ShopConfig | None = None,
) -> OrderService:
    """Build an OrderService from explicit choices or the environment.

    Args:
        storage: Storage backend (`memory` or `json`). Defaults to
            `COFFEE_SHOP_STORAGE`, then `memory`.
        payment: Payment method (`cash` or `credit_card`). Defaults to
            `COFFEE_SHOP_PAYMENT`, then `cash`.
        orders_file: JSON file for the `json` backend. Defaults to
            `COFFEE_SHOP_ORDERS_FILE`, then `orders.json`.
        notifier: Notification channel. Defaults to ConsoleNotifier.
        config: Pre-built configuration. Read from the environment when omitted.

    Returns:
        OrderService wired with the selected adapters.
    """
    config = config or ShopConfig.from_env()
    return OrderService(
        repository=_select_repository(storage, orders_file, config),
        payment_processor=_select_payment(payment, config),
        notifier=notifier or ConsoleNotifier(),
        pricing=PricingCalculator(tax_rate=config.tax_rate),
    )
