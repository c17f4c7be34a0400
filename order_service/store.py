"""
store.py — Order Store Implementations

This module provides the persistence contract consumed by the order service
and two implementations of it:
    - InMemoryOrderStore: process-local storage, used by default and in tests.
    - SqliteOrderStore: durable storage in a SQLite database file.

Stores assign identifiers on save and never fail for a missing identifier.
Any storage-layer problem is raised as StorageFailureError.
"""

import json
import logging
import sqlite3
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .exceptions import StorageFailureError
from .models import Order, Product

log = logging.getLogger(__name__)


class OrderStore(ABC):
    """Keyed storage of order records."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persists the order, assigning an id if absent, and returns the stored copy."""

    @abstractmethod
    def find_all(self) -> List[Order]:
        """Returns all persisted orders."""

    @abstractmethod
    def find_by_id(self, order_id: int) -> Optional[Order]:
        """Returns the order with the given id, or None."""


class InMemoryOrderStore(OrderStore):
    """
    Order store backed by a dictionary.

    Ids are consecutive integers starting at 1. Orders are copied on the way
    in and out so that stored records cannot be changed by callers.
    """

    def __init__(self):
        self._orders: Dict[int, Order] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def save(self, order: Order) -> Order:
        with self._lock:
            order_id = order.id if order.is_persisted else self._next_id
            self._next_id = max(self._next_id, order_id + 1)
            stored = order.model_copy(update={"id": order_id}, deep=True)
            self._orders[order_id] = stored
        log.debug(f"[Order: {order_id}] Im Speicher abgelegt.")
        return stored.model_copy(deep=True)

    def find_all(self) -> List[Order]:
        with self._lock:
            return [order.model_copy(deep=True) for order in self._orders.values()]

    def find_by_id(self, order_id: int) -> Optional[Order]:
        with self._lock:
            order = self._orders.get(order_id)
        return order.model_copy(deep=True) if order is not None else None


class SqliteOrderStore(OrderStore):
    """
    Order store backed by a SQLite database.

    Products are stored as a JSON array next to the order row. The connection
    is shared between threads and serialized by an internal lock.
    """

    def __init__(self, path: str = "orders.db"):
        self.path = path
        self._lock = threading.Lock()
        try:
            self.connection = sqlite3.connect(path, check_same_thread=False)
            self.connection.execute(
                "CREATE TABLE IF NOT EXISTS orders ("
                " id INTEGER PRIMARY KEY AUTOINCREMENT,"
                " customer_name TEXT,"
                " products TEXT NOT NULL,"
                " total_value REAL)"
            )
            self.connection.commit()
        except sqlite3.Error as e:
            log.critical(f"SQLite-Datenbank {path} nicht verfügbar: {e}")
            raise StorageFailureError(f"order store unavailable: {e}") from e
        log.info(f"SQLite Order Store geöffnet: {path}")

    def save(self, order: Order) -> Order:
        products = json.dumps([product.model_dump() for product in order.products or []])
        try:
            with self._lock, self.connection:
                cursor = self.connection.execute(
                    "INSERT OR REPLACE INTO orders (id, customer_name, products, total_value)"
                    " VALUES (?, ?, ?, ?)",
                    (order.id, order.customerName, products, order.totalValue),
                )
                order_id = order.id if order.is_persisted else cursor.lastrowid
        except sqlite3.Error as e:
            log.error(f"Speichern der Bestellung fehlgeschlagen: {e}")
            raise StorageFailureError(f"could not save order: {e}") from e
        return order.model_copy(update={"id": order_id}, deep=True)

    def find_all(self) -> List[Order]:
        rows = self._query("SELECT id, customer_name, products, total_value FROM orders ORDER BY id")
        return [self._to_order(row) for row in rows]

    def find_by_id(self, order_id: int) -> Optional[Order]:
        rows = self._query(
            "SELECT id, customer_name, products, total_value FROM orders WHERE id = ?",
            (order_id,),
        )
        return self._to_order(rows[0]) if rows else None

    def close(self):
        self.connection.close()

    def _query(self, sql: str, params: tuple = ()) -> list:
        try:
            with self._lock:
                return self.connection.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            log.error(f"Lesen aus dem Order Store fehlgeschlagen: {e}")
            raise StorageFailureError(f"could not read orders: {e}") from e

    @staticmethod
    def _to_order(row) -> Order:
        order_id, customer_name, products, total_value = row
        return Order(
            id=order_id,
            customerName=customer_name,
            products=[Product(**item) for item in json.loads(products)],
            totalValue=total_value,
        )


def create_order_store(backend: str = "memory", path: str = "orders.db") -> OrderStore:
    """
    Creates the order store selected by configuration.

    Args:
        backend (str): "memory" or "sqlite".
        path (str): Database file, used by the sqlite backend only.

    Raises:
        ValueError: If the backend is unknown.
    """
    if backend == "memory":
        return InMemoryOrderStore()
    if backend == "sqlite":
        return SqliteOrderStore(path)
    raise ValueError(f"Unknown order store backend: {backend}")
