"""Cash payment implementation."""

import logging
from decimal import Decimal
from uuid import uuid4

from coffee_shop.exceptions import PaymentProcessingError
from coffee_shop.payments.base import PaymentProcessor

logger = logging.getLogger(__name__)


class CashPayment(PaymentProcessor):
    """Cash taken at the counter; always accepted for valid amounts."""

    method_name = "Cash"

    def process_payment(self, amount: Decimal) -> str:
        if amount < 0:
            raise PaymentProcessingError("Amount cannot be negative")
        payment_id = f"CASH-{uuid4()}"
        logger.info("cash payment of %.2f accepted: %s", amount, payment_id)
        return payment_id
