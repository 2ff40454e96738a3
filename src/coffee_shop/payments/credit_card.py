"""Credit card payment implementation."""

import logging
import os
from decimal import Decimal
from uuid import uuid4

from coffee_shop.exceptions import InsufficientFundsError, PaymentProcessingError
from coffee_shop.payments.base import PaymentProcessor

DEFAULT_CARD_LIMIT = Decimal("1000")


class CreditCardPayment(PaymentProcessor):
    """Card payment through an external gateway.

    The gateway call itself is simulated; the limit check mirrors what a real
    gateway would decline.
    """

    method_name = "Credit Card"

    def __init__(self, gateway_url: str | None = None, card_limit: Decimal | str = DEFAULT_CARD_LIMIT):
        """Initialize the card processor.

        Args:
            gateway_url: Gateway endpoint. Falls back to COFFEE_SHOP_CARD_GATEWAY_URL.
            card_limit: Largest single charge the card accepts.
        """
        self.logger = logging.getLogger(__name__)
        self.gateway_url = gateway_url or os.getenv("COFFEE_SHOP_CARD_GATEWAY_URL", "https://payments.example.com")
        self.card_limit = Decimal(str(card_limit))

    def process_payment(self, amount: Decimal) -> str:
        if amount < 0:
            raise PaymentProcessingError("Amount cannot be negative")
        if amount > self.card_limit:
            raise InsufficientFundsError(f"Amount {amount} exceeds card limit {self.card_limit}")

        payment_id = f"CC-{uuid4()}"
        self.logger.info("card payment of %.2f via %s accepted: %s", amount, self.gateway_url, payment_id)
        return payment_id
