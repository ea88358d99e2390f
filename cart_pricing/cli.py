"""
Line-oriented cart report.

Reads an order count followed by that many ``<order index> <price>`` lines,
adds each order to a fresh cart and prints the priced report.

Usage:
    cart-pricing < orders.txt
    python -m cart_pricing --input orders.txt --scheme tiered
"""

import argparse
import logging
import sys
from typing import Iterable, Optional, TextIO

from .core.config import Settings, configure_logging, get_settings
from .models.item import Item
from .models.pricing import BracketScheme
from .services.pricing import PricingEngine
from .services.report import format_report
from .services.session import CartSession

logger = logging.getLogger(__name__)


def parse_orders(lines: Iterable[str], name_prefix: str = "Order-") -> list[Item]:
    """
    Parse the order count and order lines into items.

    Malformed numbers raise ValueError; nothing is recovered here.
    """
    stream = iter(lines)
    try:
        count = int(next(stream).strip())
    except StopIteration:
        raise ValueError("Missing order count") from None

    items = []
    for index in range(count):
        try:
            line = next(stream)
        except StopIteration:
            raise ValueError(f"Expected {count} order lines, got {index}") from None

        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"Malformed order line: {line.strip()!r}")
        items.append(Item(name=f"{name_prefix}{fields[0]}", unit_price=int(fields[1])))

    return items


def run(source: TextIO, sink: TextIO, settings: Settings) -> int:
    """Price the orders read from source and write the report to sink"""
    session = CartSession(engine=PricingEngine.for_scheme(settings.bracket_scheme))

    for item in parse_orders(source, settings.order_name_prefix):
        session.add_to_cart(item)

    total = session.calculate_total_amount()
    logger.info(f"Priced {len(session.entries())} distinct orders, total {total}")

    for line in format_report(total, session.category_discounts(), session.cart_items()):
        print(line, file=sink)
    return total


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cart-pricing",
        description="Price a cart of orders read from stdin or a file.",
    )
    parser.add_argument("--input", "-i", help="Read orders from this file instead of stdin")
    parser.add_argument(
        "--scheme",
        choices=[scheme.value for scheme in BracketScheme],
        help="Discount bracket table to price with",
    )
    parser.add_argument("--log-level", help="Logging level (default from settings)")
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    overrides = {}
    if args.scheme:
        overrides["bracket_scheme"] = BracketScheme(args.scheme)
    if args.log_level:
        overrides["log_level"] = args.log_level
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(settings.log_level)

    if args.input:
        with open(args.input, "r") as f:
            run(f, sys.stdout, settings)
    else:
        run(sys.stdin, sys.stdout, settings)


if __name__ == "__main__":
    main()
