"""
models.py — Data Models for Order Submission

This module defines the data structures accepted and returned by the order service.
It uses Pydantic models so that incoming payloads are type checked before they
reach the service layer.

Models:
    - Product: A named, priced item. Immutable and compared structurally.
    - Order: A customer submission with its products and derived total value.
    - OrderBatch: An unordered collection of unique orders for batch processing.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple


class Product(BaseModel):
    """
    Represents a single product in an order.

    Attributes:
        name (str): Product name. Must not be empty.
        price (float): Product price. Must not be negative.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)


class Order(BaseModel):
    """
    Represents one customer order.

    Customer name and products are optional here on purpose: the service layer
    decides whether an order is acceptable and reports why it is not.

    Attributes:
        id (Optional[int]): Assigned by the order store on save. None until persisted.
        customerName (Optional[str]): Name of the ordering customer.
        products (Optional[List[Product]]): Ordered products, in submission order.
        totalValue (Optional[float]): Sum of product prices, computed by the service.
    """
    id: Optional[int] = None
    customerName: Optional[str] = None
    products: Optional[List[Product]] = None
    totalValue: Optional[float] = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def product_set(self) -> FrozenSet[Product]:
        """Products with ordering and repetition ignored."""
        return frozenset(self.products or ())

    def duplicate_key(self) -> Tuple[Optional[str], FrozenSet[Product]]:
        """
        Returns the key two orders must share to be duplicates of each other.

        Returns:
            tuple: (customerName, frozenset of products)
        """
        return self.customerName, self.product_set()


class OrderBatch:
    """
    Unordered collection of unique orders submitted for batch processing.

    Orders that are structurally equal (all fields equal) are kept once.
    Iteration follows first insertion but callers must not rely on it.
    """

    def __init__(self, orders: Iterable[Order] = ()):
        self._orders: List[Order] = []
        self._keys: Dict[str, Order] = {}
        for order in orders:
            self.add(order)

    def add(self, order: Order) -> bool:
        """
        Adds an order unless an equal one is already present.

        Returns:
            bool: True if the order was added.
        """
        key = order.model_dump_json()
        if key in self._keys:
            return False
        self._keys[key] = order
        self._orders.append(order)
        return True

    def __contains__(self, order: object) -> bool:
        return isinstance(order, Order) and order.model_dump_json() in self._keys

    def __iter__(self) -> Iterator[Order]:
        return iter(list(self._orders))

    def __len__(self) -> int:
        return len(self._orders)

    def __repr__(self):
        return f"OrderBatch({len(self)} orders)"
