"""Tests for the pricing calculator."""

from decimal import Decimal

import pytest

from coffee_shop import Coffee, PricingCalculator, Size, Smoothie, Tea
from coffee_shop.exceptions import InvalidOrder


def test_calculate_total_is_sum_of_beverage_prices():
    calculator = PricingCalculator()
    beverages = [
        Coffee(size=Size.SMALL),
        Coffee(size=Size.MEDIUM, extra_shots=1, extras=["milk"]),
        Tea(size=Size.LARGE, variety="Green"),
        Smoothie(size=Size.LARGE, fruits=["Mango", "Kiwi", "Banana"]),
    ]

    total = calculator.calculate_total(beverages)

    assert total == sum((b.price() for b in beverages), Decimal("0"))
    assert total == Decimal("2.80") + Decimal("4.75") + Decimal("3.00") + Decimal("7.20")


def test_calculate_total_ignores_tax_rate():
    calculator = PricingCalculator(tax_rate="0.08")
    assert calculator.calculate_total([Coffee()]) == Decimal("3.50")


def test_calculate_total_empty_raises():
    with pytest.raises(InvalidOrder):
        PricingCalculator().calculate_total([])


def test_calculate_beverage_price_delegates_to_beverage(mocker):
    beverage = mocker.MagicMock()
    beverage.price.return_value = Decimal("4.20")

    assert PricingCalculator().calculate_beverage_price(beverage) == Decimal("4.20")
    beverage.price.assert_called_once_with()


def test_calculate_price_with_tax():
    calculator = PricingCalculator(tax_rate="0.08")
    assert calculator.calculate_price_with_tax(Decimal("100")) == Decimal("108.00")


def test_negative_tax_rate_rejected():
    with pytest.raises(ValueError):
        PricingCalculator(tax_rate="-0.1")


def test_apply_discount():
    calculator = PricingCalculator()
    assert calculator.apply_discount(Decimal("100"), 10) == Decimal("90.00")


def test_apply_discount_out_of_range():
    with pytest.raises(ValueError):
        PricingCalculator().apply_discount(Decimal("10"), 150)


def test_loyalty_discount_every_tenth_order():
    calculator = PricingCalculator()
    assert calculator.loyalty_discount_percent(0) == 0
    assert calculator.loyalty_discount_percent(9) == 0
    assert calculator.loyalty_discount_percent(10) == Decimal("10")
    assert calculator.loyalty_discount_percent(11) == 0
    assert calculator.loyalty_discount_percent(20) == Decimal("10")
