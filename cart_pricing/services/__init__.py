# Service modules

from .pricing import (
    BRACKET_SCHEMES,
    DEFAULT_BRACKET,
    OBSERVED_BRACKETS,
    TIERED_BRACKETS,
    DiscountBracket,
    PricingEngine,
    classify,
)
from .report import format_report
from .session import CartSession

__all__ = [
    "BRACKET_SCHEMES",
    "DEFAULT_BRACKET",
    "OBSERVED_BRACKETS",
    "TIERED_BRACKETS",
    "DiscountBracket",
    "PricingEngine",
    "classify",
    "format_report",
    "CartSession",
]
