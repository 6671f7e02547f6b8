# shopfront/cache.py
from typing import Dict, Iterable, List, Optional

from shopfront.models import Product


class ProductCache:
    """Last successful product listing, keyed by product id.

    The whole mapping is swapped on every fetch so it is always one coherent
    server snapshot. Mutations never patch it; they trigger a re-fetch.
    """

    def __init__(self):
        self._products: Dict[str, Product] = {}

    def replace(self, products: Iterable[Product]) -> None:
        self._products = {p.product_id: p for p in products}

    def get(self, product_id: str) -> Optional[Product]:
        return self._products.get(str(product_id))

    def products(self) -> List[Product]:
        return list(self._products.values())

    def ids(self) -> List[str]:
        return list(self._products)

    def __contains__(self, product_id) -> bool:
        return str(product_id) in self._products

    def __len__(self) -> int:
        return len(self._products)
