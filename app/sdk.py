from typing import Any, Dict, Optional

from .core import _make_product_dict
from .database import ProductStore
from .errors import NotFoundError, ValidationError
from .logger import get_logger
from .models import ProductIn, ProductUpdate

# This file contains the core logic for all API endpoints.

logger = get_logger("products")

WELCOME_TEXT = "Hello World! Welcome to the Product API! Go to /api/products to see all products."


# Product queries
async def list_products_logic(store: ProductStore, category: Optional[str] = None,
                              page: int = 1, limit: int = 10) -> Dict[str, Any]:
    out = store.all()
    if category:
        wanted = category.lower()
        out = [p for p in out if p["category"].lower() == wanted]

    start = (page - 1) * limit
    return {
        "page": page,
        "limit": limit,
        "total": len(out),
        "products": out[start:start + limit],
    }


async def search_products_logic(store: ProductStore, name: Optional[str]) -> Dict[str, Any]:
    if not name:
        raise ValidationError('Search query "name" is required')
    term = name.lower()
    results = [p for p in store.all() if term in p["name"].lower()]
    return {"total": len(results), "products": results}


async def product_stats_logic(store: ProductStore) -> Dict[str, Any]:
    stats: Dict[str, int] = {}
    for p in store.all():
        stats[p["category"]] = stats.get(p["category"], 0) + 1
    return {"stats": stats}


async def get_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    p = store.get(product_id)
    if p is None:
        raise NotFoundError("Product not found")
    return p


# Product mutations
async def create_product_logic(store: ProductStore, payload: ProductIn) -> Dict[str, Any]:
    pid = store.new_id()
    product = store.add(_make_product_dict(pid, payload))
    logger.info("created product %s (%s)", pid, product["name"])
    return product


async def update_product_logic(store: ProductStore, product_id: str,
                               payload: ProductUpdate) -> Dict[str, Any]:
    changes = payload.model_dump(by_alias=True, exclude_unset=True)
    p = store.update(product_id, changes)
    if p is None:
        raise NotFoundError("Product not found")
    logger.info("updated product %s fields=%s", product_id, sorted(changes))
    return p


async def delete_product_logic(store: ProductStore, product_id: str) -> None:
    if not store.remove(product_id):
        raise NotFoundError("Product not found")
    logger.info("deleted product %s", product_id)
