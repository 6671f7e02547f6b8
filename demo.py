#!/usr/bin/env python
import asyncio

import httpx

from backends.order_service import create_order_app
from backends.product_service import Catalog, create_product_app
from shopfront.console import ConsoleShell
from shopfront.coordinator import Coordinator
from shopfront.gateways import OrderGateway, ProductGateway
from shopfront.models import ImageFile

# 1x1 transparent PNG
PIXEL = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000001e221bc330000000049454e44ae426082"
)


async def main():
    catalog = Catalog()
    products = ProductGateway("http://products", transport=httpx.ASGITransport(app=create_product_app(catalog)))
    orders = OrderGateway("http://orders", transport=httpx.ASGITransport(app=create_order_app(catalog.price_of)))
    shell = ConsoleShell()
    c = Coordinator(products, orders, shell)

    async with products, orders:
        # -----------------------------
        # Initial load (empty catalog)
        # -----------------------------
        print("Starting up...")
        await c.start()

        # -----------------------------
        # Create products
        # -----------------------------
        print("\nCreating products...")
        shell.product_form = {"name": "Widget", "description": "A small widget", "price": "2.00", "stock_quantity": "10"}
        await c.create_product()
        shell.product_form = {"name": "Gadget", "price": "4.00", "stock_quantity": "3"}
        await c.create_product()

        # -----------------------------
        # Invalid product (kept in the form)
        # -----------------------------
        print("\nCreating an invalid product...")
        shell.product_form = {"name": "", "price": "-1", "stock_quantity": "1"}
        await c.create_product()
        shell.reset_product_form()

        # -----------------------------
        # Upload an image
        # -----------------------------
        widget, gadget = c.cache.products()
        print("\nUploading image without a file...")
        await c.attach_image(widget.product_id)
        print("\nUploading image...")
        shell.selected_images[widget.product_id] = ImageFile(filename="widget.png", content=PIXEL, content_type="image/png")
        await c.attach_image(widget.product_id)

        # -----------------------------
        # Cart and order
        # -----------------------------
        print("\nFilling the cart...")
        c.add_to_cart(widget.product_id, widget.name, widget.price)
        c.add_to_cart(widget.product_id, widget.name, widget.price)
        c.add_to_cart(gadget.product_id, gadget.name, gadget.price)

        print("\nPlacing order...")
        await c.place_order()

        print("\nPlacing order with an empty cart...")
        await c.place_order()


if __name__ == "__main__":
    asyncio.run(main())
