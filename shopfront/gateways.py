# shopfront/gateways.py
"""HTTP gateways for the Product and Order services.

Each gateway wraps one backend. Every call is a single attempt: failures are
raised as :mod:`shopfront.errors` exceptions and retry policy is left to the
caller.
"""
import logging
from typing import Any, List, Optional

import httpx
import pydantic

from shopfront.errors import HTTPStatusError, NetworkError, ValidationError
from shopfront.models import ImageFile, Order, OrderIn, OrderLine, Product, ProductIn

logger = logging.getLogger(__name__)


def _error_message(resp: httpx.Response) -> str:
    """Pull a human readable cause out of an error response."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, str) and detail:
        return detail
    if isinstance(detail, list) and detail:
        # FastAPI validation errors: [{"loc": [...], "msg": "...", ...}]
        msgs = [d.get("msg", str(d)) if isinstance(d, dict) else str(d) for d in detail]
        return "; ".join(msgs)
    if detail:
        return str(detail)
    return f"HTTP error! status: {resp.status_code}"


def _validation_message(exc: pydantic.ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{field}: {err['msg']}" if field else err["msg"])
    return "; ".join(parts)


class _Gateway:
    def __init__(self, base_url: str, timeout: float = 10.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        await self.client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        logger.debug("%s %s%s", method, self.base_url, path)
        try:
            r = await self.client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            raise NetworkError(f"{type(e).__name__}: {e}" if str(e) else type(e).__name__) from e
        if not r.is_success:
            raise HTTPStatusError(r.status_code, _error_message(r))
        return r

    @staticmethod
    def _decode(r: httpx.Response, model: Any) -> Any:
        try:
            return pydantic.TypeAdapter(model).validate_json(r.content)
        except pydantic.ValidationError as e:
            raise HTTPStatusError(r.status_code, "unexpected response body") from e


class ProductGateway(_Gateway):
    async def list_products(self) -> List[Product]:
        r = await self._request("GET", "/products/")
        return self._decode(r, List[Product])

    async def create_product(self, name: str, price, stock_quantity: int, description: Optional[str] = None) -> Product:
        try:
            payload = ProductIn(name=name, description=description, price=price, stock_quantity=stock_quantity)
        except pydantic.ValidationError as e:
            raise ValidationError(_validation_message(e)) from e
        r = await self._request("POST", "/products/", json=payload.model_dump(mode="json"))
        return self._decode(r, Product)

    async def attach_image(self, product_id: str, image: ImageFile) -> None:
        files = {"image": (image.filename, image.content, image.content_type)}
        await self._request("POST", f"/products/{product_id}/upload-image/", files=files)

    async def delete_product(self, product_id: str) -> None:
        await self._request("DELETE", f"/products/{product_id}")


class OrderGateway(_Gateway):
    async def list_orders(self) -> List[Order]:
        r = await self._request("GET", "/orders/")
        return self._decode(r, List[Order])

    async def create_order(self, items: List[dict]) -> Order:
        try:
            payload = OrderIn(items=[OrderLine(**it) for it in items])
        except pydantic.ValidationError as e:
            raise ValidationError(_validation_message(e)) from e
        r = await self._request("POST", "/orders/", json=payload.model_dump(mode="json"))
        return self._decode(r, Order)
