"""Shared fixtures for the order service tests."""

from __future__ import annotations

import os

# Keep test runs from writing a log file into the working directory.
os.environ.setdefault("LOG_FILE", "")

import pytest

from order_service import InMemoryOrderStore, Order, OrderService, Product


@pytest.fixture
def store() -> InMemoryOrderStore:
    return InMemoryOrderStore()


@pytest.fixture
def service(store: InMemoryOrderStore) -> OrderService:
    return OrderService(store)


@pytest.fixture
def product_a() -> Product:
    return Product(name="Product A", price=50.0)


@pytest.fixture
def product_b() -> Product:
    return Product(name="Product B", price=25.5)


@pytest.fixture
def john_order(product_a: Product) -> Order:
    return Order(customerName="John Doe", products=[product_a])
