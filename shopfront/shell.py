# shopfront/shell.py
import time
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Protocol

from shopfront.models import CartLineItem, ImageFile, Order, Product

INFO = "info"
SUCCESS = "success"
ERROR = "error"


class Shell(Protocol):
    """What the coordinator needs from the presentation layer."""

    def render_products(self, products: List[Product]) -> None: ...

    def render_orders(self, orders: List[Order]) -> None: ...

    def render_cart(self, items: List[CartLineItem], total: Decimal) -> None: ...

    def products_placeholder(self, text: str) -> None: ...

    def orders_placeholder(self, text: str) -> None: ...

    def notify(self, message: str, severity: str = INFO) -> None: ...

    def read_product_form(self) -> Dict[str, object]: ...

    def reset_product_form(self) -> None: ...

    def selected_image(self, product_id: str) -> Optional[ImageFile]: ...


@dataclass
class Notice:
    message: str
    severity: str
    posted_at: float


class NoticeSlot:
    """Single-slot transient notification.

    Posting replaces whatever is shown and restarts the timer; once ``ttl``
    seconds have passed the slot reads empty.
    """

    def __init__(self, ttl: float = 5.0, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._notice: Optional[Notice] = None

    def post(self, message: str, severity: str = INFO) -> Notice:
        self._notice = Notice(message, severity, self._clock())
        return self._notice

    def current(self) -> Optional[Notice]:
        if self._notice is None:
            return None
        if self._clock() - self._notice.posted_at >= self.ttl:
            self._notice = None
        return self._notice
