"""Cart storage for a single cart session"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from ..models.cart import CartLine
from ..models.item import Item

logger = logging.getLogger(__name__)


@dataclass
class CartEntry:
    """Stored price and quantity for one distinct item name"""
    unit_price: int
    quantity: int


class CartEntriesView:
    """
    Read-only view over the entries of a cart.

    Iterating yields fresh ``CartLine`` snapshots in insertion order, so the
    view can be walked any number of times and always reflects the current
    contents of the store.
    """

    def __init__(self, entries: dict[str, CartEntry]):
        self._entries = entries

    def __iter__(self) -> Iterator[CartLine]:
        for name, entry in self._entries.items():
            yield CartLine(name, entry.unit_price, entry.quantity)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"CartEntriesView({list(self)!r})"


class CartStore:
    """In-memory, insertion-ordered cart storage"""

    def __init__(self):
        self._entries: dict[str, CartEntry] = {}

    def add(self, item: Item) -> None:
        """Add one occurrence of an item to the cart"""
        entry = self._entries.get(item.name)

        if entry:
            # First price wins; later prices are ignored
            entry.quantity += 1
        else:
            self._entries[item.name] = CartEntry(unit_price=item.unit_price, quantity=1)

        logger.debug(f"Added {item.name} (quantity now {self._entries[item.name].quantity})")

    def remove(self, item: Item) -> None:
        """Remove one occurrence of an item; absent names are ignored"""
        entry = self._entries.get(item.name)
        if not entry:
            logger.debug(f"Remove ignored, {item.name} not in cart")
            return

        entry.quantity -= 1
        if entry.quantity == 0:
            del self._entries[item.name]
            logger.debug(f"Removed {item.name} from cart")
        else:
            logger.debug(f"Decremented {item.name} (quantity now {entry.quantity})")

    def entries(self) -> CartEntriesView:
        """Get a read-only view of (name, unit_price, quantity) lines"""
        return CartEntriesView(self._entries)

    def get(self, name: str) -> Optional[CartLine]:
        """Get a snapshot of one line by item name"""
        entry = self._entries.get(name)
        if not entry:
            return None
        return CartLine(name, entry.unit_price, entry.quantity)

    def clear(self) -> None:
        """Remove all items from the cart"""
        self._entries.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
