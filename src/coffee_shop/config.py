"""Runtime configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from coffee_shop.payments.credit_card import DEFAULT_CARD_LIMIT


@dataclass(frozen=True)
class ShopConfig:
    storage: str = "memory"
    orders_file: str = "orders.json"
    payment: str = "cash"
    card_gateway_url: str | None = None
    card_limit: Decimal = DEFAULT_CARD_LIMIT
    tax_rate: Decimal = Decimal("0")

    @classmethod
    def from_env(cls) -> ShopConfig:
        return cls(
            storage=os.getenv("COFFEE_SHOP_STORAGE", cls.storage).strip().lower(),
            orders_file=os.getenv("COFFEE_SHOP_ORDERS_FILE", cls.orders_file),
            payment=os.getenv("COFFEE_SHOP_PAYMENT", cls.payment).strip().lower(),
            card_gateway_url=os.getenv("COFFEE_SHOP_CARD_GATEWAY_URL"),
            card_limit=_env_decimal("COFFEE_SHOP_CARD_LIMIT", cls.card_limit),
            tax_rate=_env_decimal("COFFEE_SHOP_TAX_RATE", cls.tax_rate),
        )


def _env_decimal(name: str, default: Decimal) -> Decimal:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return Decimal(raw.strip())
    except InvalidOperation as e:
        raise ValueError(f"{name} must be a decimal number, got {raw!r}") from e
