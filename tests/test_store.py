"""Tests for the order store implementations."""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from order_service import (
    InMemoryOrderStore,
    Order,
    Product,
    SqliteOrderStore,
    StorageFailureError,
    create_order_store,
)


@pytest.fixture(params=["memory", "sqlite"])
def any_store(request, tmp_path: Path):
    """Each store implementation, freshly created."""
    if request.param == "memory":
        yield InMemoryOrderStore()
    else:
        store = SqliteOrderStore(str(tmp_path / "orders.db"))
        yield store
        store.close()


def _order(name: str = "John Doe", price: float = 50.0) -> Order:
    return Order(customerName=name, products=[Product(name="Product A", price=price)], totalValue=price)


class TestOrderStoreContract:
    """Behavior shared by all stores."""

    def test_save_assigns_id(self, any_store) -> None:
        saved = any_store.save(_order())
        assert saved.id is not None

    def test_ids_are_unique(self, any_store) -> None:
        ids = {any_store.save(_order(name=f"Customer {i}")).id for i in range(5)}
        assert len(ids) == 5

    def test_find_all(self, any_store) -> None:
        any_store.save(_order("A"))
        any_store.save(_order("B"))
        assert sorted(o.customerName for o in any_store.find_all()) == ["A", "B"]

    def test_find_by_id(self, any_store) -> None:
        saved = any_store.save(_order(price=12.5))
        found = any_store.find_by_id(saved.id)
        assert found == saved
        assert found.products == [Product(name="Product A", price=12.5)]

    def test_find_by_missing_id(self, any_store) -> None:
        assert any_store.find_by_id(999) is None

    def test_save_with_id_keeps_it(self, any_store) -> None:
        saved = any_store.save(_order())
        updated = any_store.save(saved.model_copy(update={"customerName": "Jane Doe"}))
        assert updated.id == saved.id
        assert len(any_store.find_all()) == 1


class TestInMemoryOrderStore:
    """Copy semantics of the in-memory store."""

    def test_returned_orders_are_copies(self) -> None:
        store = InMemoryOrderStore()
        saved = store.save(_order())
        saved.customerName = "Changed"
        assert store.find_by_id(saved.id).customerName == "John Doe"

    def test_ids_start_at_one(self) -> None:
        store = InMemoryOrderStore()
        assert store.save(_order()).id == 1
        assert store.save(_order("B")).id == 2


class TestSqliteOrderStore:
    """SQLite specifics."""

    def test_data_survives_reopen(self, tmp_path: Path) -> None:
        path = str(tmp_path / "orders.db")
        store = SqliteOrderStore(path)
        saved = store.save(_order())
        store.close()

        reopened = SqliteOrderStore(path)
        assert reopened.find_by_id(saved.id) == saved
        reopened.close()

    def test_closed_connection_raises_storage_failure(self, tmp_path: Path) -> None:
        store = SqliteOrderStore(str(tmp_path / "orders.db"))
        store.close()
        with pytest.raises(StorageFailureError):
            store.find_all()
        with pytest.raises(StorageFailureError):
            store.save(_order())

    def test_unopenable_path_raises_storage_failure(self, tmp_path: Path) -> None:
        with pytest.raises(StorageFailureError):
            SqliteOrderStore(str(tmp_path / "missing" / "orders.db"))

    def test_storage_failure_keeps_cause(self, tmp_path: Path) -> None:
        store = SqliteOrderStore(str(tmp_path / "orders.db"))
        store.close()
        with pytest.raises(StorageFailureError) as exc_info:
            store.find_by_id(1)
        assert isinstance(exc_info.value.__cause__, sqlite3.Error)


class TestCreateOrderStore:
    """Backend selection."""

    def test_memory(self) -> None:
        assert isinstance(create_order_store("memory"), InMemoryOrderStore)

    def test_sqlite(self, tmp_path: Path) -> None:
        store = create_order_store("sqlite", str(tmp_path / "orders.db"))
        assert isinstance(store, SqliteOrderStore)
        store.close()

    def test_unknown_backend(self) -> None:
        with pytest.raises(ValueError, match="Unknown order store backend"):
            create_order_store("redis")
