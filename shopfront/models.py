# shopfront/models.py
import math
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class Product(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    product_id: str
    name: str
    description: Optional[str] = None
    price: Decimal = Field(ge=0)
    stock_quantity: int = Field(ge=0)
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProductIn(BaseModel):
    name: str
    description: Optional[str] = None
    price: Decimal = Field(ge=0)
    stock_quantity: int = Field(ge=0)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be empty")
        return v

    @field_validator("price")
    @classmethod
    def _price_fits_json(cls, v: Decimal) -> Decimal:
        # sent as a JSON number, so it has to survive float conversion
        if not math.isfinite(float(v)):
            raise ValueError("price is out of range")
        return v

    @field_serializer("price")
    def _price_as_number(self, v: Decimal) -> float:
        return float(v)


class OrderLine(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    product_id: str
    quantity: int = Field(gt=0)


class OrderIn(BaseModel):
    items: List[OrderLine] = Field(min_length=1)


class Order(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    order_id: str
    user_id: Optional[str] = None
    items: List[OrderLine] = []
    total_amount: Decimal = Decimal("0")
    status: Optional[str] = None


class CartLineItem(BaseModel):
    """One cart row; name and unit price are captured when the product is added."""

    product_id: str
    name: str
    unit_price: Decimal
    quantity: int = 1

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


class ImageFile(BaseModel):
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"
