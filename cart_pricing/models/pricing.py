"""Pricing models"""

from enum import Enum

from pydantic import BaseModel


class DiscountCategory(str, Enum):
    """Discount category credited by a price bracket"""
    CHEAP = "Cheap"
    MODERATE = "Moderate"
    EXPENSIVE = "Expensive"
    UNCATEGORIZED = "Uncategorized"


class BracketScheme(str, Enum):
    """Named bracket tables"""
    OBSERVED = "observed"
    TIERED = "tiered"


class PricedLine(BaseModel):
    """Discount breakdown for one cart line"""
    name: str
    unit_price: int
    quantity: int
    subtotal: int
    percentage: int
    discount: int
    net_subtotal: int
    category: DiscountCategory = DiscountCategory.UNCATEGORIZED


class PricingResult(BaseModel):
    """Outcome of a single pricing pass"""
    total: int = 0
    category_discounts: dict[DiscountCategory, int] = {}
    lines: list[PricedLine] = []


class ReportResponse(BaseModel):
    """Formatted report lines"""
    lines: list[str]
