"""Base payment processor interface."""

from abc import ABC, abstractmethod
from decimal import Decimal


class PaymentProcessor(ABC):
    """Abstract base class for payment methods.

    ``retry_safe`` is True only for adapters whose charges may be repeated
    without double billing. The order workflow never retries on its own.
    """

    method_name: str = "Unknown Payment Method"
    retry_safe: bool = False

    @abstractmethod
    def process_payment(self, amount: Decimal) -> str:
        """Charge ``amount`` and return a confirmation token.

        Raises:
            PaymentError: If the charge is declined or fails.
        """
        pass
