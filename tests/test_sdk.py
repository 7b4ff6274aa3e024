# tests/test_sdk.py
import httpx
import pytest
from fastapi.testclient import TestClient
from app.config import Settings
from app.database import ProductStore
from app.main import create_app
from sdk.pystore import ProductClient

store = ProductStore()
client = ProductClient(
    base_url="http://testserver",
    session=TestClient(create_app(store=store, settings=Settings())),
)


def reset():
    store.reset()


def test_root_and_queries():
    reset()
    assert client.root().startswith("Hello World!")
    assert client.list_products(category="kitchen")["total"] == 1
    assert client.list_products(page=1, limit=2)["products"][1]["id"] == "2"
    assert client.search_products("phone")["products"][0]["id"] == "2"
    assert client.get_stats() == {"stats": {"electronics": 2, "kitchen": 1}}
    assert client.get_product("3")["name"] == "Coffee Maker"


def test_create_update_delete():
    reset()
    created = client.create_product("Blender", "600W blender", 80, "kitchen", in_stock=False)
    assert created["inStock"] is False

    updated = client.update_product(created["id"], price=75, in_stock=True)
    assert updated["price"] == 75
    assert updated["inStock"] is True
    assert updated["name"] == "Blender"

    assert client.delete_product(created["id"]) is None
    assert client.list_products(category="kitchen")["total"] == 1


def test_errors_raise():
    reset()
    with pytest.raises(httpx.HTTPStatusError):
        client.get_product("missing")
    with pytest.raises(httpx.HTTPStatusError):
        client.search_products("")


def test_api_key_is_sent_as_header():
    s = ProductClient(api_key="secret")
    assert s.session.headers["X-API-Key"] == "secret"


def test_update_command_parses_stock_flags():
    from sdk.pystore import build_parser

    parser = build_parser()
    args = parser.parse_args(["update-product", "--product-id", "3", "--in-stock"])
    assert args.in_stock is True
    args = parser.parse_args(["update-product", "--product-id", "3", "--out-of-stock", "--price", "9.5"])
    assert args.in_stock is False
    assert args.price == 9.5
    args = parser.parse_args(["update-product", "--product-id", "3"])
    assert args.in_stock is None
    with pytest.raises(SystemExit):
        parser.parse_args(["update-product", "--product-id", "3", "--in-stock", "--out-of-stock"])


def test_cli_strips_product_id(monkeypatch):
    import cli

    monkeypatch.setattr(cli, "get_product_completer", lambda: None)
    monkeypatch.setattr(cli, "prompt_with_autocomplete", lambda message, completer=None, default="": "  2 \n")
    assert cli.ask_product_id() == "2"
