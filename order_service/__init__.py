"""Order submission service: validation, deduplication and persistence of customer orders."""

from .exceptions import DuplicateOrderError, InvalidOrderError, OrderServiceError, StorageFailureError
from .models import Order, OrderBatch, Product
from .service import OrderService
from .store import InMemoryOrderStore, OrderStore, SqliteOrderStore, create_order_store

__all__ = [
    "DuplicateOrderError",
    "InMemoryOrderStore",
    "InvalidOrderError",
    "Order",
    "OrderBatch",
    "OrderService",
    "OrderServiceError",
    "OrderStore",
    "Product",
    "SqliteOrderStore",
    "StorageFailureError",
    "create_order_store",
]
