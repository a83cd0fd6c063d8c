import pytest

from core import config
from core.models import InventoryItem, Product
from core.store import Store


@pytest.fixture(autouse=True)
def fixed_settings(monkeypatch):
    """Pin the settings the assertions below depend on."""
    monkeypatch.setattr(config, "TAX_RATE", 0.10)
    monkeypatch.setattr(config, "LOW_STOCK_THRESHOLD", 5)
    monkeypatch.setattr(config, "TRANSACTIONS_PER_PAGE", 5)


@pytest.fixture
def store():
    return Store()


@pytest.fixture
def widget():
    return Product("p1", "Widget", 10.00, "Electronics", 50, "1000000000001")


@pytest.fixture
def gadget():
    return Product("p2", "Gadget", 5.00, "Electronics", 20, "1000000000002")


@pytest.fixture
def sample_items():
    return [
        InventoryItem(id="a", sku="SKU-A", name="Wireless Headphones", category="Electronics",
                      sub_category="Audio", quantity=45, cost=45.5, price=79.99, reorder_point=10),
        InventoryItem(id="b", sku="SKU-B", name="Laptop Stand", category="Accessories",
                      sub_category="Computer Accessories", quantity=0, cost=15.0, price=29.99),
        InventoryItem(id="c", sku="SKU-C", name="Desk Lamp", category="Home",
                      sub_category="Lighting", quantity=3, cost=8.0, price=20.0),
    ]
