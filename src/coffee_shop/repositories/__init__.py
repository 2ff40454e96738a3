"""Order repositories for coffee-shop."""

from coffee_shop.repositories.base import OrderRepository
from coffee_shop.repositories.json_file import JsonOrderRepository
from coffee_shop.repositories.memory import MemoryOrderRepository

__all__ = ["OrderRepository", "JsonOrderRepository", "MemoryOrderRepository"]
