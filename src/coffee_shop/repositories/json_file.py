"""JSON file-backed order repository."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from uuid import UUID

from pydantic import TypeAdapter, ValidationError

from coffee_shop.exceptions import (
    InvalidOrder,
    OrderAlreadyExists,
    OrderNotStored,
    StorageLoadError,
    StorageWriteError,
)
from coffee_shop.order import Order
from coffee_shop.repositories.base import OrderRepository

_ORDERS_ADAPTER = TypeAdapter(list[Order])


class JsonOrderRepository(OrderRepository):
    """Stores all orders as a JSON array in a single file.

    The file is read once at construction and rewritten in full after every
    mutation.
    """

    def __init__(self, path: str | Path):
        self.logger = logging.getLogger(__name__)
        self.path = Path(path)
        self._orders: dict[UUID, Order] = self._load() if self.path.exists() else {}

    def save(self, order: Order) -> None:
        if order.id in self._orders:
            raise OrderAlreadyExists(f"Order {order.id} already exists")
        self._orders[order.id] = order.model_copy(deep=True)
        self._flush(rollback=lambda: self._orders.pop(order.id, None))

    def find_by_id(self, order_id: UUID) -> Order | None:
        order = self._orders.get(order_id)
        return order.model_copy(deep=True) if order else None

    def update(self, order: Order) -> None:
        previous = self._orders.get(order.id)
        if previous is None:
            raise OrderNotStored(f"Order {order.id} not found")
        self._orders[order.id] = order.model_copy(deep=True)
        self._flush(rollback=lambda: self._orders.__setitem__(order.id, previous))

    def find_by_customer_email(self, email: str) -> list[Order]:
        return [o.model_copy(deep=True) for o in self._orders.values() if o.customer.email == email]

    def list_all(self) -> list[Order]:
        return [o.model_copy(deep=True) for o in self._orders.values()]

    def delete(self, order_id: UUID) -> bool:
        removed = self._orders.pop(order_id, None)
        if removed is None:
            return False
        self._flush(rollback=lambda: self._orders.__setitem__(order_id, removed))
        return True

    def _load(self) -> dict[UUID, Order]:
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise StorageLoadError(f"Failed to read {self.path}: {e}") from e

        if not raw.strip():
            return {}

        try:
            orders = _ORDERS_ADAPTER.validate_json(raw)
        except (ValidationError, InvalidOrder) as e:
            raise StorageLoadError(f"Failed to parse {self.path}: {e}") from e

        self.logger.debug("loaded %d orders from %s", len(orders), self.path)
        return {order.id: order for order in orders}

    def _flush(self, rollback) -> None:
        """Write every order to disk; undo the in-memory change on failure."""
        payload = _ORDERS_ADAPTER.dump_json(list(self._orders.values()), indent=2)
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{self.path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "wb") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self.path)
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            rollback()
            raise StorageWriteError(f"Failed to write {self.path}: {e}") from e
