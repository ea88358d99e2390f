"""
Cart pricing: bracket classification and discount accumulation.

Each cart line is classified by its unit price against an ordered table of
brackets. The first bracket whose predicate matches decides the discount
percentage and the category credited with the discount.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ..database.carts import CartStore
from ..models.pricing import BracketScheme, DiscountCategory, PricedLine, PricingResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiscountBracket:
    """A price range mapped to a discount percentage"""
    predicate: Callable[[int], bool]
    percentage: int
    category: DiscountCategory
    description: str = ""

    def matches(self, unit_price: int) -> bool:
        return self.predicate(unit_price)


# Applies when no bracket matches
DEFAULT_BRACKET = DiscountBracket(
    predicate=lambda price: True,
    percentage=1,
    category=DiscountCategory.UNCATEGORIZED,
    description="default",
)

# The first rule captures every price above 10, so the Moderate and Expensive
# rules can never match. Kept as-is until the intended tiers are confirmed.
OBSERVED_BRACKETS: tuple[DiscountBracket, ...] = (
    DiscountBracket(lambda price: price > 10, 10, DiscountCategory.CHEAP, "price > 10"),
    DiscountBracket(lambda price: 10 < price <= 20, 20, DiscountCategory.MODERATE, "10 < price <= 20"),
    DiscountBracket(lambda price: price > 20, 30, DiscountCategory.EXPENSIVE, "price > 20"),
)

TIERED_BRACKETS: tuple[DiscountBracket, ...] = (
    DiscountBracket(lambda price: price > 20, 30, DiscountCategory.EXPENSIVE, "price > 20"),
    DiscountBracket(lambda price: 10 < price <= 20, 20, DiscountCategory.MODERATE, "10 < price <= 20"),
)

BRACKET_SCHEMES: dict[BracketScheme, tuple[DiscountBracket, ...]] = {
    BracketScheme.OBSERVED: OBSERVED_BRACKETS,
    BracketScheme.TIERED: TIERED_BRACKETS,
}


def classify(
    unit_price: int,
    brackets: tuple[DiscountBracket, ...] = OBSERVED_BRACKETS,
) -> DiscountBracket:
    """Return the first bracket matching the price, or the default bracket"""
    return next(
        (bracket for bracket in brackets if bracket.matches(unit_price)),
        DEFAULT_BRACKET,
    )


class PricingEngine:
    """Computes cart totals and per-category discount sums"""

    def __init__(
        self,
        brackets: Optional[tuple[DiscountBracket, ...]] = None,
        scheme: BracketScheme = BracketScheme.OBSERVED,
    ):
        self.brackets = brackets if brackets is not None else BRACKET_SCHEMES[scheme]
        self._category_discounts: dict[DiscountCategory, int] = {}

    @classmethod
    def for_scheme(cls, scheme: str) -> "PricingEngine":
        """Build an engine using one of the named bracket tables"""
        return cls(scheme=BracketScheme(scheme))

    @property
    def category_discounts(self) -> dict[DiscountCategory, int]:
        """Discount sums per category from the last pricing pass"""
        return dict(self._category_discounts)

    def price_line(self, name: str, unit_price: int, quantity: int) -> PricedLine:
        """Price a single cart line"""
        subtotal = unit_price * quantity
        bracket = classify(unit_price, self.brackets)
        discount = subtotal * bracket.percentage // 100

        return PricedLine(
            name=name,
            unit_price=unit_price,
            quantity=quantity,
            subtotal=subtotal,
            percentage=bracket.percentage,
            discount=discount,
            net_subtotal=subtotal - discount,
            category=bracket.category,
        )

    def compute_total(self, cart: CartStore) -> PricingResult:
        """
        Price every line of the cart.

        The category accumulator is rebuilt on every call, so repeated calls
        on an unchanged cart give identical results.

        Returns:
            PricingResult with the total, category discounts and line breakdown
        """
        accumulated: dict[DiscountCategory, int] = {}
        lines: list[PricedLine] = []
        total = 0

        for name, unit_price, quantity in cart.entries():
            line = self.price_line(name, unit_price, quantity)
            if line.category != DiscountCategory.UNCATEGORIZED:
                accumulated[line.category] = accumulated.get(line.category, 0) + line.discount
            total += line.net_subtotal
            lines.append(line)

        # Report categories in declaration order, independent of add order
        self._category_discounts = {
            category: accumulated[category]
            for category in DiscountCategory
            if category in accumulated
        }

        logger.debug(f"Priced {len(lines)} lines, total {total}")
        return PricingResult(
            total=total,
            category_discounts=self.category_discounts,
            lines=lines,
        )

    def item_counts(self, cart: CartStore) -> dict[str, int]:
        """Map item name to quantity, in cart order"""
        return {name: quantity for name, _, quantity in cart.entries()}
