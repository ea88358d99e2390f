# Storage modules

from .carts import CartStore, CartEntry, CartEntriesView

__all__ = ["CartStore", "CartEntry", "CartEntriesView"]
