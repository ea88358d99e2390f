"""Cart session: one cart store priced by one engine"""

import logging
from typing import Optional

from ..database.carts import CartEntriesView, CartStore
from ..models.item import Item
from ..models.pricing import DiscountCategory, PricingResult
from .pricing import PricingEngine

logger = logging.getLogger(__name__)


class CartSession:
    """
    Owner of a single cart for the duration of one session.

    Sessions are constructed explicitly and handed to whoever needs them;
    there is no shared, process-wide instance.
    """

    def __init__(
        self,
        engine: Optional[PricingEngine] = None,
        store: Optional[CartStore] = None,
    ):
        self.engine = engine or PricingEngine()
        self.store = store if store is not None else CartStore()
        self.last_result: Optional[PricingResult] = None

    def add_to_cart(self, item: Item) -> None:
        """Add one occurrence of an item"""
        self.store.add(item)

    def remove_from_cart(self, item: Item) -> None:
        """Remove one occurrence of an item"""
        self.store.remove(item)

    def calculate_total_amount(self) -> int:
        """Price the cart and return the total payable amount"""
        self.last_result = self.engine.compute_total(self.store)
        return self.last_result.total

    def price(self) -> PricingResult:
        """Price the cart and return the full breakdown"""
        self.last_result = self.engine.compute_total(self.store)
        return self.last_result

    def category_discounts(self) -> dict[DiscountCategory, int]:
        return self.engine.category_discounts

    def cart_items(self) -> dict[str, int]:
        return self.engine.item_counts(self.store)

    def entries(self) -> CartEntriesView:
        return self.store.entries()

    def clear(self) -> None:
        """Empty the cart and forget the last pricing pass"""
        self.store.clear()
        self.last_result = None
        logger.debug("Cart cleared")
