"""Pricing calculator."""

from collections.abc import Sequence
from decimal import Decimal

from coffee_shop.exceptions import InvalidOrder
from coffee_shop.schema import Beverage, to_money

LOYALTY_EVERY_N_ORDERS = 10
LOYALTY_DISCOUNT_PERCENT = Decimal("10")


class PricingCalculator:
    """Sums beverage prices and applies tax or discounts on request.

    Size and extras are priced by each beverage; the calculator only adds
    them up, so new drinks never require changes here.
    """

    def __init__(self, tax_rate: Decimal | str | float = Decimal("0")):
        self.tax_rate = Decimal(str(tax_rate))
        if self.tax_rate < 0:
            raise ValueError(f"tax_rate must not be negative: {tax_rate}")

    def calculate_beverage_price(self, beverage: Beverage) -> Decimal:
        return beverage.price()

    def calculate_total(self, beverages: Sequence[Beverage]) -> Decimal:
        """Return the sum of each beverage's own price.

        Raises:
            InvalidOrder: If ``beverages`` is empty.
        """
        if not beverages:
            raise InvalidOrder("Cannot price an empty beverage list")
        return to_money(sum((self.calculate_beverage_price(b) for b in beverages), Decimal("0")))

    def calculate_price_with_tax(self, amount: Decimal) -> Decimal:
        return to_money(amount * (1 + self.tax_rate))

    def apply_discount(self, amount: Decimal, discount_percent: Decimal | int) -> Decimal:
        discount_percent = Decimal(discount_percent)
        if not 0 <= discount_percent <= 100:
            raise ValueError(f"discount_percent must be between 0 and 100: {discount_percent}")
        return to_money(amount * (1 - discount_percent / 100))

    def loyalty_discount_percent(self, order_count: int) -> Decimal:
        """Every tenth order earns a discount."""
        if order_count > 0 and order_count % LOYALTY_EVERY_N_ORDERS == 0:
            return LOYALTY_DISCOUNT_PERCENT
        return Decimal("0")
