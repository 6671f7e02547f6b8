# shopfront/coordinator.py
"""Workflows tying the cart, the product cache and the two services together.

Every public coroutine is one workflow: one user intent from input capture to
the final render/notify. Failures end the workflow with an error notification;
nothing is retried. Workflows are not de-duplicated and may interleave freely
on the event loop, so two overlapping refreshes leave whichever response
arrived last in the cache.
"""
import asyncio
import logging
from typing import Optional

from shopfront.cache import ProductCache
from shopfront.cart import Cart
from shopfront.errors import ShopfrontError, ValidationError
from shopfront.gateways import OrderGateway, ProductGateway
from shopfront.shell import ERROR, SUCCESS, Shell

logger = logging.getLogger(__name__)


class Coordinator:
    def __init__(
        self,
        products: ProductGateway,
        orders: OrderGateway,
        shell: Shell,
        cart: Optional[Cart] = None,
        cache: Optional[ProductCache] = None,
    ):
        self.products = products
        self.orders = orders
        self.shell = shell
        self.cart = cart if cart is not None else Cart()
        self.cache = cache if cache is not None else ProductCache()

    def _fail(self, what: str, exc: ShopfrontError, message: Optional[str] = None) -> None:
        logger.warning("%s failed (%s): %s", what, exc.kind, exc)
        self.shell.notify(message or str(exc), ERROR)

    def _render_cart(self) -> None:
        self.shell.render_cart(self.cart.items(), self.cart.compute_total())

    async def start(self) -> None:
        self._render_cart()
        await asyncio.gather(self.refresh_catalog(), self.refresh_orders())

    # ---------------------------
    # Catalog
    # ---------------------------
    async def refresh_catalog(self) -> None:
        self.shell.products_placeholder("Loading products...")
        try:
            products = await self.products.list_products()
        except ShopfrontError as e:
            self.shell.products_placeholder("Could not load products. Please check the Product Service.")
            self._fail("catalog refresh", e, f"Failed to load products: {e}")
            return
        self.cache.replace(products)
        self.shell.render_products(self.cache.products())

    async def create_product(self) -> None:
        form = self.shell.read_product_form()
        try:
            product = await self.products.create_product(
                name=form.get("name", ""),
                description=form.get("description") or None,
                price=form.get("price"),
                stock_quantity=form.get("stock_quantity"),
            )
        except ShopfrontError as e:
            # form is left as typed so the user can correct it
            self._fail("create product", e)
            return
        logger.info("created product %s", product.product_id)
        self.shell.notify("Product added successfully!", SUCCESS)
        self.shell.reset_product_form()
        await self.refresh_catalog()

    async def attach_image(self, product_id: str) -> None:
        image = self.shell.selected_image(product_id)
        if image is None:
            self._fail("attach image", ValidationError("no image selected"), "Select an image first!")
            return
        try:
            await self.products.attach_image(product_id, image)
        except ShopfrontError as e:
            self._fail("attach image", e)
            return
        self.shell.notify("Image uploaded successfully!", SUCCESS)
        await self.refresh_catalog()

    async def delete_product(self, product_id: str) -> None:
        try:
            await self.products.delete_product(product_id)
        except ShopfrontError as e:
            self._fail("delete product", e)
            return
        # cart lines for this product are kept as they are
        self.shell.notify("Product deleted successfully!", SUCCESS)
        await self.refresh_catalog()

    # ---------------------------
    # Cart / orders
    # ---------------------------
    def add_to_cart(self, product_id: str, name: str, unit_price) -> None:
        self.cart.add_item(product_id, name, unit_price)
        self._render_cart()
        self.shell.notify(f'Added "{name}" to cart!', SUCCESS)

    async def refresh_orders(self) -> None:
        self.shell.orders_placeholder("Loading orders...")
        try:
            orders = await self.orders.list_orders()
        except ShopfrontError as e:
            self.shell.orders_placeholder("Could not load orders. Check Order Service.")
            self._fail("order refresh", e, f"Failed to load orders: {e}")
            return
        self.shell.render_orders(orders)

    async def place_order(self) -> None:
        if self.cart.is_empty():
            self._fail("place order", ValidationError("cart is empty"), "Cart is empty!")
            return
        try:
            order = await self.orders.create_order(self.cart.to_order_lines())
        except ShopfrontError as e:
            # cart stays intact so the order can be retried as is
            self._fail("place order", e)
            return
        logger.info("placed order %s", order.order_id)
        self.cart.clear()
        self._render_cart()
        self.shell.notify("Order placed successfully!", SUCCESS)
        await self.refresh_orders()
