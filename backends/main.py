# backends/main.py
# uvicorn backends.main:product_app --port 8000
# uvicorn backends.main:order_app --port 8001
#
# Both apps share one in-memory catalog, so only run them from a single
# process (e.g. `python -m backends.main`) when orders must see new products.
import asyncio

import uvicorn

from backends.order_service import create_order_app
from backends.product_service import Catalog, create_product_app

catalog = Catalog()
product_app = create_product_app(catalog)
order_app = create_order_app(catalog.price_of)


async def serve(host: str = "127.0.0.1", product_port: int = 8000, order_port: int = 8001):
    servers = [
        uvicorn.Server(uvicorn.Config(product_app, host=host, port=product_port, log_level="info")),
        uvicorn.Server(uvicorn.Config(order_app, host=host, port=order_port, log_level="info")),
    ]
    await asyncio.gather(*(s.serve() for s in servers))


if __name__ == "__main__":
    asyncio.run(serve())
