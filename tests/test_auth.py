# tests/test_auth.py
from fastapi.testclient import TestClient
from app.auth import allow_all, gate_from_settings
from app.config import Settings
from app.database import ProductStore
from app.main import create_app

PRODUCT = {"name": "Mouse", "description": "Wireless mouse", "price": 20, "category": "electronics"}

store = ProductStore()
client = TestClient(create_app(
    store=store,
    settings=Settings(api_key="secret", require_api_key=True),
))


def reset():
    store.reset()


def test_reads_do_not_need_a_key():
    reset()
    assert client.get("/api/products").status_code == 200
    assert client.get("/api/products/1").status_code == 200


def test_mutations_without_key_are_denied():
    reset()
    assert client.post("/api/products", json=PRODUCT).status_code == 401
    assert client.put("/api/products/1", json={"price": 1}).status_code == 401
    r = client.delete("/api/products/1")
    assert r.status_code == 401
    assert r.json() == {"error": "Unauthorized"}
    assert len(store) == 3


def test_wrong_key_is_denied():
    reset()
    r = client.post("/api/products", json=PRODUCT, headers={"X-API-Key": "nope"})
    assert r.status_code == 401


def test_auth_runs_before_validation():
    reset()
    r = client.post("/api/products", json={})
    assert r.status_code == 401


def test_valid_key_is_allowed():
    reset()
    r = client.post("/api/products", json=PRODUCT, headers={"X-API-Key": "secret"})
    assert r.status_code == 201
    r = client.delete(f"/api/products/{r.json()['id']}", headers={"X-API-Key": "secret"})
    assert r.status_code == 204


def test_injected_gate_replaces_settings():
    denied = TestClient(create_app(store=ProductStore(), auth_gate=lambda request: False, settings=Settings()))
    assert denied.delete("/api/products/1").status_code == 401


def test_gate_from_settings_defaults_to_stub():
    assert gate_from_settings(Settings()) is allow_all
    # a key alone does not switch the gate on
    assert gate_from_settings(Settings(api_key="secret")) is allow_all
    assert gate_from_settings(Settings(require_api_key=True)) is allow_all
