# sdk/pystore.py
import argparse
import requests
from typing import Any, Dict, Optional
from rich import print

API_KEY_HEADER = "X-API-Key"


class ProductClient:
    def __init__(self, base_url: str = "http://localhost:3000", api_key: Optional[str] = None,
                 timeout: int = 10, session: Optional[Any] = None):
        self.base_url = base_url.rstrip("/")
        # any requests-compatible session works, e.g. FastAPI's TestClient
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        if api_key:
            self.session.headers.update({API_KEY_HEADER: api_key})

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def root(self) -> str:
        r = self.session.get(self._url("/"), timeout=self.timeout)
        r.raise_for_status()
        return r.text

    # Queries
    def list_products(self, category: Optional[str] = None, page: Optional[int] = None,
                      limit: Optional[int] = None):
        params = {}
        if category:
            params["category"] = category
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        r = self.session.get(self._url("/api/products"), params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def search_products(self, name: str):
        r = self.session.get(self._url("/api/products/search"), params={"name": name}, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_stats(self):
        r = self.session.get(self._url("/api/products/stats"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: str):
        r = self.session.get(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Mutations
    def create_product(self, name: str, description: str, price: float, category: str,
                       in_stock: Optional[bool] = None):
        payload: Dict[str, Any] = {
            "name": name, "description": description, "price": price, "category": category
        }
        if in_stock is not None:
            payload["inStock"] = in_stock
        r = self.session.post(self._url("/api/products"), json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_product(self, product_id: str, name: Optional[str] = None,
                       description: Optional[str] = None, price: Optional[float] = None,
                       category: Optional[str] = None, in_stock: Optional[bool] = None):
        fields = {
            "name": name, "description": description, "price": price,
            "category": category, "inStock": in_stock,
        }
        payload = {k: v for k, v in fields.items() if v is not None}
        r = self.session.put(self._url(f"/api/products/{product_id}"), json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def delete_product(self, product_id: str) -> None:
        r = self.session.delete(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        r.raise_for_status()
        return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Product API client")
    parser.add_argument("--base-url", default="http://127.0.0.1:3000")
    parser.add_argument("--api-key", default=None)
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list-products", help="List products")
    lp.add_argument("--category", help="Filter products by category")
    lp.add_argument("--page", type=int)
    lp.add_argument("--limit", type=int)

    sp = subparsers.add_parser("search", help="Search for products by name")
    sp.add_argument("--name", required=True, help="Product name to search")

    subparsers.add_parser("stats", help="Product count per category")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True)

    cp = subparsers.add_parser("create-product", help="Create a new product")
    cp.add_argument("--name", required=True)
    cp.add_argument("--description", required=True)
    cp.add_argument("--price", type=float, required=True)
    cp.add_argument("--category", required=True)
    cp.add_argument("--out-of-stock", action="store_true")

    up = subparsers.add_parser("update-product", help="Update fields of a product")
    up.add_argument("--product-id", required=True)
    up.add_argument("--name")
    up.add_argument("--description")
    up.add_argument("--price", type=float)
    up.add_argument("--category")
    stock = up.add_mutually_exclusive_group()
    stock.add_argument("--in-stock", dest="in_stock", action="store_const", const=True, default=None)
    stock.add_argument("--out-of-stock", dest="in_stock", action="store_const", const=False)

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    c = ProductClient(base_url=args.base_url, api_key=args.api_key)

    if args.command == "list-products":
        print(c.list_products(args.category, args.page, args.limit))
    elif args.command == "search":
        print(c.search_products(args.name))
    elif args.command == "stats":
        print(c.get_stats())
    elif args.command == "get-product":
        print(c.get_product(args.product_id))
    elif args.command == "create-product":
        in_stock = False if args.out_of_stock else None
        print(c.create_product(args.name, args.description, args.price, args.category, in_stock))
    elif args.command == "update-product":
        print(c.update_product(args.product_id, args.name, args.description, args.price,
                               args.category, args.in_stock))
    elif args.command == "delete-product":
        c.delete_product(args.product_id)
        print(f"[green]Deleted {args.product_id}[/green]")


if __name__ == "__main__":
    main()
