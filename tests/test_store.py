# tests/test_store.py
import pytest

from app.database import SEED_PRODUCTS, ProductStore


def test_store_is_seeded_in_order():
    store = ProductStore()
    assert [p["id"] for p in store.all()] == ["1", "2", "3"]


def test_stores_are_isolated():
    a, b = ProductStore(), ProductStore()
    a.remove("1")
    a.get("2")["name"] = "Changed"
    assert len(b) == 3
    assert b.get("2")["name"] == "Smartphone"
    assert SEED_PRODUCTS[1]["name"] == "Smartphone"


def test_reset_restores_seed():
    store = ProductStore()
    store.add({"id": "x", "name": "n"})
    store.remove("1")
    store.reset()
    assert [p["id"] for p in store.all()] == ["1", "2", "3"]


def test_add_rejects_duplicate_id():
    store = ProductStore()
    with pytest.raises(ValueError):
        store.add({"id": "1", "name": "dup"})


def test_new_id_is_unused():
    store = ProductStore()
    ids = {store.new_id() for _ in range(50)}
    assert len(ids) == 50
    assert not ids & {"1", "2", "3"}


def test_update_merges_and_keeps_id():
    store = ProductStore()
    updated = store.update("3", {"id": "other", "inStock": True})
    assert updated["id"] == "3"
    assert updated["inStock"] is True
    assert updated["name"] == "Coffee Maker"
    assert store.update("missing", {"price": 1}) is None


def test_remove_missing_returns_false():
    store = ProductStore(seed=[])
    assert len(store) == 0
    assert store.remove("1") is False
