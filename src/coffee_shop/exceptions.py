"""Custom exceptions for coffee-shop."""


class CoffeeShopError(Exception):
    """Base exception for coffee-shop."""

    pass


class OrderError(CoffeeShopError):
    """Base exception for failures surfaced by the order workflow."""

    pass


class InvalidOrder(OrderError):
    """Raised when caller input violates an order precondition."""

    pass


class InvalidOrderTransition(InvalidOrder):
    """Raised when an order cannot move to the requested status."""

    pass


class OrderNotFound(OrderError):
    """Raised when no stored order has the requested id."""

    pass


class PersistenceFailed(OrderError):
    """Raised when the order repository rejects a save or update."""

    pass


class PaymentFailed(OrderError):
    """Raised when the payment processor declines or errors."""

    pass


class NotificationFailed(OrderError):
    """Raised when a notification cannot be delivered."""

    pass


class RepositoryError(CoffeeShopError):
    """Base exception for order repository adapters."""

    pass


class OrderAlreadyExists(RepositoryError):
    """Raised when saving an order whose id is already stored."""

    pass


class OrderNotStored(RepositoryError):
    """Raised when updating an order that was never saved."""

    pass


class StorageLoadError(RepositoryError):
    """Raised when stored orders cannot be read or parsed."""

    pass


class StorageWriteError(RepositoryError):
    """Raised when orders cannot be written to the backing store."""

    pass


class PaymentError(CoffeeShopError):
    """Base exception for payment processor adapters."""

    pass


class InsufficientFundsError(PaymentError):
    """Raised when the amount exceeds what the payment method allows."""

    pass


class InvalidCardError(PaymentError):
    """Raised when card details are rejected."""

    pass


class PaymentProcessingError(PaymentError):
    """Raised when the processor cannot complete the charge."""

    pass


class NotificationError(CoffeeShopError):
    """Raised by notifier adapters when a message cannot be sent."""

    pass
