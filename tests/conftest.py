from decimal import Decimal
from typing import Any, Dict, List, Optional

import pytest

from shopfront.coordinator import Coordinator
from shopfront.errors import HTTPStatusError, NetworkError
from shopfront.models import ImageFile, Order, Product


class RecordingShell:
    def __init__(self):
        self.calls: List[tuple] = []
        self.notices: List[tuple] = []
        self.product_form: Dict[str, Any] = {}
        self.images: Dict[str, ImageFile] = {}
        self.products: Optional[List[Product]] = None
        self.orders: Optional[List[Order]] = None
        self.cart = None

    def render_products(self, products):
        self.calls.append(("render_products", len(products)))
        self.products = products

    def render_orders(self, orders):
        self.calls.append(("render_orders", len(orders)))
        self.orders = orders

    def render_cart(self, items, total):
        self.calls.append(("render_cart", len(items)))
        self.cart = (items, total)

    def products_placeholder(self, text):
        self.calls.append(("products_placeholder", text))

    def orders_placeholder(self, text):
        self.calls.append(("orders_placeholder", text))

    def notify(self, message, severity="info"):
        self.notices.append((message, severity))

    def read_product_form(self):
        return dict(self.product_form)

    def reset_product_form(self):
        self.product_form = {}

    def selected_image(self, product_id):
        return self.images.get(product_id)

    @property
    def last_notice(self):
        return self.notices[-1] if self.notices else None


def _product(pid: str, name: str = "Widget", price: str = "2.00", stock: int = 5) -> Product:
    return Product(product_id=pid, name=name, price=Decimal(price), stock_quantity=stock)


class FakeProductGateway:
    def __init__(self, products: Optional[List[Product]] = None):
        self.products = list(products or [])
        self.calls: List[tuple] = []
        self.fail_with: Dict[str, Exception] = {}

    def _maybe_fail(self, op):
        if op in self.fail_with:
            raise self.fail_with[op]

    async def list_products(self):
        self.calls.append(("list_products",))
        self._maybe_fail("list_products")
        return list(self.products)

    async def create_product(self, name, price, stock_quantity, description=None):
        self.calls.append(("create_product", name))
        self._maybe_fail("create_product")
        p = _product(str(len(self.products) + 1), name, str(price), int(stock_quantity))
        self.products.append(p)
        return p

    async def attach_image(self, product_id, image):
        self.calls.append(("attach_image", product_id, image.filename))
        self._maybe_fail("attach_image")

    async def delete_product(self, product_id):
        self.calls.append(("delete_product", product_id))
        self._maybe_fail("delete_product")
        self.products = [p for p in self.products if p.product_id != product_id]


class FakeOrderGateway:
    def __init__(self):
        self.orders: List[Order] = []
        self.calls: List[tuple] = []
        self.fail_with: Dict[str, Exception] = {}

    async def list_orders(self):
        self.calls.append(("list_orders",))
        if "list_orders" in self.fail_with:
            raise self.fail_with["list_orders"]
        return list(self.orders)

    async def create_order(self, items):
        self.calls.append(("create_order", items))
        if "create_order" in self.fail_with:
            raise self.fail_with["create_order"]
        order = Order(order_id=f"o{len(self.orders) + 1}", user_id="guest", items=items, status="pending")
        self.orders.append(order)
        return order


@pytest.fixture
def shell():
    return RecordingShell()


@pytest.fixture
def product_gw():
    return FakeProductGateway([_product("1", "Widget", "2.00"), _product("2", "Gadget", "4.00")])


@pytest.fixture
def order_gw():
    return FakeOrderGateway()


@pytest.fixture
def coordinator(product_gw, order_gw, shell):
    return Coordinator(product_gw, order_gw, shell)


@pytest.fixture
def network_down():
    return NetworkError("ConnectError: connection refused")


@pytest.fixture
def server_error():
    return HTTPStatusError(500, "HTTP error! status: 500")


@pytest.fixture
def make_product():
    return _product


@pytest.fixture
def make_coordinator():
    """Coordinator factory; anything not passed in gets a fresh fake."""
    def _make(products=None, orders=None, shell=None):
        return Coordinator(
            products if products is not None else FakeProductGateway(),
            orders if orders is not None else FakeOrderGateway(),
            shell if shell is not None else RecordingShell(),
        )
    return _make
