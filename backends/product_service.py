# backends/product_service.py
# In-memory Product service for local runs, the demo and tests.
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, File, HTTPException, Response, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field


class ProductIn(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    price: float = Field(ge=0)
    stock_quantity: int = Field(ge=0)


class Catalog:
    """Product store shared by both dev services (the order service reads prices from it)."""

    def __init__(self):
        self.products: Dict[str, Dict[str, Any]] = {}
        self.images: Dict[str, Dict[str, Any]] = {}
        self._next_id = 1

    def add(self, p: ProductIn) -> Dict[str, Any]:
        pid = str(self._next_id)
        self._next_id += 1
        now = datetime.now(timezone.utc).isoformat()
        self.products[pid] = {
            "product_id": pid,
            "name": p.name,
            "description": p.description,
            "price": p.price,
            "stock_quantity": p.stock_quantity,
            "image_url": None,
            "created_at": now,
            "updated_at": now,
        }
        return self.products[pid]

    def get(self, product_id: str) -> Dict[str, Any]:
        p = self.products.get(product_id)
        if not p:
            raise HTTPException(status_code=404, detail="product not found")
        return p

    def price_of(self, product_id: str) -> Optional[float]:
        p = self.products.get(str(product_id))
        return p["price"] if p else None

    def reset(self):
        self.products.clear()
        self.images.clear()
        self._next_id = 1


def create_product_app(catalog: Optional[Catalog] = None) -> FastAPI:
    catalog = catalog if catalog is not None else Catalog()
    app = FastAPI(title="product-service (in-memory dev)")
    app.state.catalog = catalog

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/products/")
    async def list_products() -> List[Dict[str, Any]]:
        return list(catalog.products.values())

    @app.post("/products/", status_code=201)
    async def create_product(payload: ProductIn):
        return catalog.add(payload)

    @app.post("/products/{product_id}/upload-image/")
    async def upload_image(product_id: str, image: UploadFile = File(...)):
        p = catalog.get(product_id)
        content = await image.read()
        if not content:
            raise HTTPException(status_code=400, detail="empty image")
        catalog.images[product_id] = {
            "content": content,
            "content_type": image.content_type or "application/octet-stream",
        }
        p["image_url"] = f"/products/{product_id}/image"
        p["updated_at"] = datetime.now(timezone.utc).isoformat()
        return {"message": "image uploaded", "image_url": p["image_url"]}

    @app.get("/products/{product_id}/image")
    async def get_image(product_id: str):
        catalog.get(product_id)
        img = catalog.images.get(product_id)
        if not img:
            raise HTTPException(status_code=404, detail="image not found")
        return Response(content=img["content"], media_type=img["content_type"])

    @app.delete("/products/{product_id}", status_code=204)
    async def delete_product(product_id: str):
        catalog.get(product_id)
        del catalog.products[product_id]
        catalog.images.pop(product_id, None)
        return Response(status_code=204)

    # Utility: reset (for tests/demo)
    @app.post("/reset")
    async def reset():
        catalog.reset()
        return {"status": "reset"}

    return app
