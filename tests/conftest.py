import pytest

from cart_pricing.core.config import Settings
from cart_pricing.database.carts import CartStore
from cart_pricing.models.item import Item
from cart_pricing.services.pricing import PricingEngine


@pytest.fixture
def store() -> CartStore:
    return CartStore()


@pytest.fixture
def engine() -> PricingEngine:
    return PricingEngine()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def item_a() -> Item:
    return Item(name="A", unit_price=30)


@pytest.fixture
def item_b() -> Item:
    return Item(name="B", unit_price=5)
