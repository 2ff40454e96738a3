"""Notifiers for coffee-shop."""

from coffee_shop.notifiers.base import Notifier
from coffee_shop.notifiers.console import ConsoleNotifier

__all__ = ["Notifier", "ConsoleNotifier"]
