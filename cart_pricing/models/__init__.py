# Cart Pricing Models

from .item import Item
from .cart import CartLine, CartLineOut, AddToCartRequest, CartResponse
from .pricing import (
    BracketScheme,
    DiscountCategory,
    PricedLine,
    PricingResult,
    ReportResponse,
)

__all__ = [
    "Item",
    "CartLine",
    "CartLineOut",
    "AddToCartRequest",
    "CartResponse",
    "BracketScheme",
    "DiscountCategory",
    "PricedLine",
    "PricingResult",
    "ReportResponse",
]
