"""Payment processors for coffee-shop."""

from coffee_shop.payments.base import PaymentProcessor
from coffee_shop.payments.cash import CashPayment
from coffee_shop.payments.credit_card import CreditCardPayment

__all__ = ["PaymentProcessor", "CashPayment", "CreditCardPayment"]
