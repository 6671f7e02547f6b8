# backends/order_service.py
# In-memory Order service for local runs, the demo and tests.
import uuid
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

PriceLookup = Callable[[str], Optional[float]]


class OrderItemIn(BaseModel):
    product_id: str
    quantity: int = Field(gt=0)


class OrderIn(BaseModel):
    items: List[OrderItemIn]
    user_id: str = "guest"


def create_order_app(price_lookup: PriceLookup) -> FastAPI:
    """Order service; ``price_lookup`` is the pricing authority for order totals."""
    orders: Dict[str, Dict[str, Any]] = {}
    app = FastAPI(title="order-service (in-memory dev)")
    app.state.orders = orders

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/orders/")
    async def list_orders():
        return list(orders.values())

    @app.post("/orders/", status_code=201)
    async def create_order(payload: OrderIn):
        if not payload.items:
            raise HTTPException(status_code=400, detail="order has no items")
        total = Decimal("0")
        for it in payload.items:
            price = price_lookup(it.product_id)
            if price is None:
                raise HTTPException(status_code=404, detail=f"product {it.product_id} not found")
            total += Decimal(str(price)) * it.quantity

        order_id = uuid.uuid4().hex
        order = {
            "order_id": order_id,
            "user_id": payload.user_id,
            "items": [it.model_dump() for it in payload.items],
            "total_amount": float(total.quantize(Decimal("0.01"))),
            "status": "pending",
        }
        orders[order_id] = order
        return order

    @app.post("/reset")
    async def reset():
        orders.clear()
        return {"status": "reset"}

    return app
