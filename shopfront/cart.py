# shopfront/cart.py
from decimal import Decimal
from typing import Dict, List

from shopfront.models import CartLineItem


class Cart:
    """Client-side cart. Lives only for the session and has no server copy."""

    def __init__(self):
        self._items: List[CartLineItem] = []

    def add_item(self, product_id: str, name: str, unit_price) -> CartLineItem:
        product_id = str(product_id)
        for item in self._items:
            if item.product_id == product_id:
                # keeps the name/price captured on the first add
                item.quantity += 1
                return item
        item = CartLineItem(product_id=product_id, name=name, unit_price=Decimal(str(unit_price)))
        self._items.append(item)
        return item

    def clear(self) -> None:
        self._items = []

    def compute_total(self) -> Decimal:
        return sum((it.line_total for it in self._items), Decimal("0"))

    def items(self) -> List[CartLineItem]:
        return [it.model_copy() for it in self._items]

    def is_empty(self) -> bool:
        return not self._items

    def to_order_lines(self) -> List[Dict[str, object]]:
        # no price here: the Order service prices the order
        return [{"product_id": it.product_id, "quantity": it.quantity} for it in self._items]

    def __len__(self) -> int:
        return len(self._items)
