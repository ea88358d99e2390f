"""Plain-text cart report"""

from typing import Mapping

from ..models.pricing import DiscountCategory


def format_report(
    total: int,
    category_discounts: Mapping[DiscountCategory, int],
    item_counts: Mapping[str, int],
) -> list[str]:
    """
    Build the report lines for a priced cart.

    Categories with no discount are skipped. Items follow cart order.
    """
    lines = [f"Total Amount: {total}"]

    for category, value in category_discounts.items():
        if value > 0:
            lines.append(f"{DiscountCategory(category).value} Category Discount: {value}")

    for name, quantity in item_counts.items():
        lines.append(f"{name} ({quantity} items)")

    return lines
