import copy
import uuid
from typing import Any, Dict, List, Optional

# In-memory product collection. Each application owns one ProductStore.

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


class ProductStore:
    """Ordered list of product records, keyed by their unique id."""

    def __init__(self, seed: Optional[List[Dict[str, Any]]] = None):
        self._seed = SEED_PRODUCTS if seed is None else seed
        self._products: List[Dict[str, Any]] = []
        self.reset()

    def reset(self) -> None:
        self._products = copy.deepcopy(self._seed)

    def __len__(self) -> int:
        return len(self._products)

    def all(self) -> List[Dict[str, Any]]:
        return list(self._products)

    def new_id(self) -> str:
        while True:
            pid = str(uuid.uuid4())
            if self._index_of(pid) is None:
                return pid

    def _index_of(self, product_id: str) -> Optional[int]:
        for i, p in enumerate(self._products):
            if p["id"] == product_id:
                return i
        return None

    def get(self, product_id: str) -> Optional[Dict[str, Any]]:
        i = self._index_of(product_id)
        return None if i is None else self._products[i]

    def add(self, product: Dict[str, Any]) -> Dict[str, Any]:
        if self._index_of(product["id"]) is not None:
            raise ValueError(f"duplicate product id: {product['id']}")
        self._products.append(product)
        return product

    def update(self, product_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        i = self._index_of(product_id)
        if i is None:
            return None
        # id is never overwritten
        changes = {k: v for k, v in changes.items() if k != "id"}
        self._products[i] = {**self._products[i], **changes}
        return self._products[i]

    def remove(self, product_id: str) -> bool:
        i = self._index_of(product_id)
        if i is None:
            return False
        del self._products[i]
        return True
