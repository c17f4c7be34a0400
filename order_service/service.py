"""
service.py — Core Order Service Logic

This module contains the gatekeeper between untrusted caller input and the
order store. Every order passes the same steps before it is persisted:

1. Validate presence of the order, the customer name and at least one product
2. Reject the order if an equal one (same customer, same set of products) exists
3. Compute the total value as the sum of all product prices
4. Hand the order to the store, which assigns the id

Concurrency:
    The duplicate scan and the save run inside one exclusive section, held by
    every create call and for the full length of a batch. Two concurrent
    submissions of the same order can therefore never both succeed.
"""

import logging
import math
import threading
from typing import Iterable, List, Optional

from .exceptions import DuplicateOrderError, InvalidOrderError
from .models import Order, OrderBatch
from .store import OrderStore

log = logging.getLogger(__name__)


class OrderService:
    """
    Creates, validates and reads orders on top of an OrderStore.

    Args:
        store (OrderStore): Persistence backend.
        lock (optional): Exclusive-section primitive guarding order creation.
            Must be reentrant, since batch processing creates orders while
            holding it. Defaults to a new threading.RLock.
    """

    def __init__(self, store: OrderStore, lock=None):
        self.store = store
        self._lock = lock if lock is not None else threading.RLock()

    def create_order(self, order: Optional[Order]) -> Order:
        """
        Validates, deduplicates and persists a new order.

        Args:
            order (Order): Candidate order. Caller-supplied id and totalValue are discarded.

        Returns:
            Order: The persisted order with assigned id and computed totalValue.

        Raises:
            InvalidOrderError: If the order, its customer name or its products are missing.
            DuplicateOrderError: If an equal order is already persisted.
            StorageFailureError: If the store fails.
        """
        self._validate_order(order)

        with self._lock:
            if self._is_duplicate_order(order):
                log.warning(f"Doppelte Bestellung erkannt: {order}")
                raise DuplicateOrderError("duplicate order detected")

            total_value = math.fsum(product.price for product in order.products)
            # ids are assigned by the store only
            to_save = order.model_copy(update={"totalValue": total_value, "id": None}, deep=True)
            created = self.store.save(to_save)

        log.info(f"[Order: {created.id}] Bestellung angelegt. Gesamtwert: {total_value}")
        return created

    def get_all_orders(self) -> List[Order]:
        log.info("Lade alle Bestellungen aus dem Store.")
        return self.store.find_all()

    def get_order_by_id(self, order_id: int) -> Optional[Order]:
        """Returns the order with the given id, or None if there is none."""
        log.info(f"[Order: {order_id}] Lade Bestellung nach ID.")
        return self.store.find_by_id(order_id)

    def process_high_volume_orders(self, orders: Iterable[Order]) -> int:
        """
        Creates every order of a batch under one exclusive section.

        The first failing order aborts the batch. Orders created before the
        failure stay persisted; the remaining ones are not attempted.

        Args:
            orders (Iterable[Order]): Candidate orders. Equal orders are processed once.

        Returns:
            int: Number of orders created.

        Raises:
            InvalidOrderError, DuplicateOrderError, StorageFailureError: From the failing order.
        """
        batch = orders if isinstance(orders, OrderBatch) else OrderBatch(orders)
        log.info(f"Verarbeite Batch mit {len(batch)} Bestellungen.")

        processed = 0
        with self._lock:
            for order in batch:
                try:
                    self.create_order(order)
                except Exception:
                    log.error(f"Batch abgebrochen nach {processed} von {len(batch)} Bestellungen.")
                    raise
                processed += 1

        log.info(f"Batch abgeschlossen: {processed} Bestellungen angelegt.")
        return processed

    def _is_duplicate_order(self, order: Order) -> bool:
        log.debug(f"Prüfe auf doppelte Bestellung: {order}")
        key = order.duplicate_key()
        return any(existing.duplicate_key() == key for existing in self.store.find_all())

    @staticmethod
    def _validate_order(order: Optional[Order]):
        if order is None:
            log.error("Bestellung fehlt (None).")
            raise InvalidOrderError("order cannot be null")
        if not order.customerName:
            log.error("Kundenname fehlt.")
            raise InvalidOrderError("customer name is required")
        if not order.products:
            log.error("Bestellung enthält keine Produkte.")
            raise InvalidOrderError("order must contain at least one product")
