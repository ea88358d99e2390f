"""Cart models"""

from typing import NamedTuple, Optional

from pydantic import BaseModel, Field


class CartLine(NamedTuple):
    """Read-only snapshot of one cart entry"""
    name: str
    unit_price: int
    quantity: int


class CartLineOut(BaseModel):
    """Cart line as returned by the API"""
    name: str
    unit_price: int
    quantity: int


class AddToCartRequest(BaseModel):
    """Request to add one occurrence of an item to the cart"""
    name: str = Field(min_length=1)
    unit_price: int = Field(ge=0)


class CartResponse(BaseModel):
    """Cart API response"""
    items: list[CartLineOut] = []
    item_count: int = 0
    message: Optional[str] = None
