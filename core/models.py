"""Record types for every dashboard module.

All records are frozen dataclasses: edits produce a new record with
`dataclasses.replace`, never an in-place change.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from core.constants import DEFAULT_CATEGORY, DEFAULT_SUBCATEGORY, STOCK_IN


@dataclass(frozen=True)
class InventoryItem:
    id: str
    sku: str
    name: str
    category: str = DEFAULT_CATEGORY
    sub_category: str = DEFAULT_SUBCATEGORY
    quantity: int = 0
    cost: float = 0.0
    price: float = 0.0
    status: str = STOCK_IN
    reorder_point: int = 5
    description: str = ""
    supplier: str = ""
    last_restocked: str = ""
    image: str = ""


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    price: float
    category: str
    stock: int
    barcode: str
    image: str = ""


@dataclass(frozen=True)
class CartItem:
    product: Product
    quantity: int = 1

    @property
    def line_total(self) -> float:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class Receipt:
    transaction_id: str
    date: str
    amount: float
    payment_method: str
    status: str = "completed"
    subtotal: float = 0.0
    tax: float = 0.0
    items: Tuple[CartItem, ...] = ()


@dataclass(frozen=True)
class Order:
    id: str
    customer: str
    date: str
    total: float
    status: str
    payment_status: str
    items: int
    shipping_method: str


@dataclass(frozen=True)
class Customer:
    id: str
    name: str
    email: str
    phone: str
    address: str
    join_date: str
    total_spent: float
    orders: int
    status: str
    type: str
    avatar: str = ""


@dataclass(frozen=True)
class Supplier:
    id: str
    name: str
    contact_person: str
    email: str
    phone: str
    address: str
    join_date: str
    status: str
    rating: int
    categories: Tuple[str, ...] = ()
    total_orders: int = 0
    total_spent: float = 0.0


@dataclass(frozen=True)
class Transaction:
    id: str
    customer: str
    date: str
    amount: float
    status: str
    payment_method: str
    items: int = 0


@dataclass(frozen=True)
class SubCategory:
    name: str
    parent_category: str
    items: int = 0
    value: float = 0.0


@dataclass(frozen=True)
class Category:
    name: str
    items: int
    value: float
    expanded: bool = False
    subcategories: Tuple[SubCategory, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class LowStockEntry:
    id: str
    name: str
    stock: int
    max_stock: int
    status: str = "low"


@dataclass(frozen=True)
class KPI:
    title: str
    value: str
    change: float
    trend: str = "up"
    description: Optional[str] = None
