"""coffee-shop: A coffee-shop ordering workflow built on swappable adapters."""

from coffee_shop.core import build_order_service
from coffee_shop.order import Order, OrderItem, OrderStatus
from coffee_shop.pricing import PricingCalculator
from coffee_shop.schema import Beverage, Coffee, Customer, Size, Smoothie, Tea
from coffee_shop.service import OrderService

__version__ = "0.1.0"

__all__ = [
    "build_order_service",
    "Beverage",
    "Coffee",
    "Customer",
    "Order",
    "OrderItem",
    "OrderService",
    "OrderStatus",
    "PricingCalculator",
    "Size",
    "Smoothie",
    "Tea",
    "__version__",
]
