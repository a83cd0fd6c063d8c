"""Per-session application state with typed actions and pure reducers.

Pages never mutate lists directly: they dispatch an action and the store
replaces its state with `reduce(state, action)`.
"""
import logging
import uuid
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from core import mock_data, pos
from core.models import (
    CartItem,
    Category,
    Customer,
    InventoryItem,
    Order,
    Product,
    Receipt,
    Supplier,
)
from core.router import normalize_path
from core.services import toggle_category, with_derived_status

logger = logging.getLogger(__name__)

INVENTORY = "inventory"
ORDERS = "orders"
CUSTOMERS = "customers"
SUPPLIERS = "suppliers"
RECORD_KINDS = (INVENTORY, ORDERS, CUSTOMERS, SUPPLIERS)


@dataclass(frozen=True)
class PendingDelete:
    kind: str
    record_id: str
    label: str = ""


@dataclass(frozen=True)
class AppState:
    inventory: Tuple[InventoryItem, ...] = ()
    categories: Tuple[Category, ...] = ()
    products: Tuple[Product, ...] = ()
    cart: Tuple[CartItem, ...] = ()
    sales: Tuple[Receipt, ...] = ()
    orders: Tuple[Order, ...] = ()
    customers: Tuple[Customer, ...] = ()
    suppliers: Tuple[Supplier, ...] = ()
    pending_delete: Optional[PendingDelete] = None
    path: str = "/"
    sidebar_collapsed: bool = False


# ---------- actions ----------

@dataclass(frozen=True)
class SaveItem:
    item: InventoryItem
    created: bool = False


@dataclass(frozen=True)
class ImportItems:
    items: Tuple[InventoryItem, ...]


@dataclass(frozen=True)
class ToggleCategory:
    name: str


@dataclass(frozen=True)
class RequestDelete:
    kind: str
    record_id: str
    label: str = ""


@dataclass(frozen=True)
class ConfirmDelete:
    pass


@dataclass(frozen=True)
class CancelDelete:
    pass


@dataclass(frozen=True)
class RecordAction:
    """An edit/export request on a read-only list; only logged."""

    kind: str
    action: str
    record_id: str = ""


@dataclass(frozen=True)
class AddToCart:
    product: Product


@dataclass(frozen=True)
class UpdateQuantity:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class RemoveFromCart:
    product_id: str


@dataclass(frozen=True)
class ClearCart:
    pass


@dataclass(frozen=True)
class CompleteSale:
    receipt: Receipt


@dataclass(frozen=True)
class Navigate:
    path: str


@dataclass(frozen=True)
class ToggleSidebar:
    pass


def new_item_id() -> str:
    return f"item-{uuid.uuid4().hex[:12]}"


def save_item(item: InventoryItem) -> SaveItem:
    """Action creator: items without an id are new and get one here."""
    if item.id:
        return SaveItem(item=item, created=False)
    return SaveItem(item=replace(item, id=new_item_id()), created=True)


# ---------- reducers ----------

def inventory_reducer(items: Tuple[InventoryItem, ...], action) -> Tuple[InventoryItem, ...]:
    if isinstance(action, SaveItem):
        saved = with_derived_status(action.item)
        if action.created:
            return items + (saved,)
        if not any(i.id == saved.id for i in items):
            logger.warning("Ignoring edit of unknown inventory item %s", saved.id)
            return items
        return tuple(saved if i.id == saved.id else i for i in items)
    if isinstance(action, ImportItems):
        by_id = {i.id: i for i in action.items}
        updated = tuple(with_derived_status(by_id.pop(i.id)) if i.id in by_id else i for i in items)
        return updated + tuple(with_derived_status(i) for i in by_id.values())
    return items


def cart_reducer(cart: Tuple[CartItem, ...], action) -> Tuple[CartItem, ...]:
    if isinstance(action, AddToCart):
        return pos.add_to_cart(cart, action.product)
    if isinstance(action, UpdateQuantity):
        return pos.update_quantity(cart, action.product_id, action.quantity)
    if isinstance(action, RemoveFromCart):
        return pos.remove_from_cart(cart, action.product_id)
    if isinstance(action, (ClearCart, CompleteSale)):
        return pos.clear_cart(cart)
    return cart


def _apply_delete(state: AppState) -> AppState:
    pending = state.pending_delete
    cleared = replace(state, pending_delete=None)
    if pending is None:
        return cleared
    if pending.kind == INVENTORY:
        logger.info("Deleted inventory item %s", pending.record_id)
        return replace(
            cleared,
            inventory=tuple(i for i in state.inventory if i.id != pending.record_id),
        )
    # Orders, customers and suppliers are read-only mock lists
    logger.info("Delete %s requested: %s", pending.kind, pending.record_id)
    return cleared


_INVENTORY_ACTIONS = (SaveItem, ImportItems)
_CART_ACTIONS = (AddToCart, UpdateQuantity, RemoveFromCart, ClearCart)


def reduce(state: AppState, action) -> AppState:
    """Return the state after `action`. Raises TypeError for unknown actions."""
    if isinstance(action, _INVENTORY_ACTIONS):
        return replace(state, inventory=inventory_reducer(state.inventory, action))
    if isinstance(action, ToggleCategory):
        return replace(state, categories=tuple(toggle_category(state.categories, action.name)))
    if isinstance(action, _CART_ACTIONS):
        return replace(state, cart=cart_reducer(state.cart, action))
    if isinstance(action, CompleteSale):
        return replace(
            state,
            cart=cart_reducer(state.cart, action),
            sales=state.sales + (action.receipt,),
        )
    if isinstance(action, RequestDelete):
        if action.kind not in RECORD_KINDS:
            raise ValueError(f"Unknown record kind: {action.kind}")
        return replace(
            state,
            pending_delete=PendingDelete(action.kind, action.record_id, action.label),
        )
    if isinstance(action, ConfirmDelete):
        return _apply_delete(state)
    if isinstance(action, CancelDelete):
        return replace(state, pending_delete=None)
    if isinstance(action, RecordAction):
        logger.info("%s %s requested: %s", action.action.title(), action.kind, action.record_id)
        return state
    if isinstance(action, Navigate):
        return replace(state, path=normalize_path(action.path))
    if isinstance(action, ToggleSidebar):
        return replace(state, sidebar_collapsed=not state.sidebar_collapsed)
    raise TypeError(f"Unknown action: {action!r}")


def initial_state() -> AppState:
    """Fresh state seeded from the mock data."""
    return AppState(
        inventory=tuple(mock_data.INVENTORY_ITEMS),
        categories=tuple(mock_data.CATEGORIES),
        products=tuple(mock_data.POS_PRODUCTS),
        orders=tuple(mock_data.ORDERS),
        customers=tuple(mock_data.CUSTOMERS),
        suppliers=tuple(mock_data.SUPPLIERS),
    )


@dataclass
class Store:
    state: AppState = field(default_factory=initial_state)

    def dispatch(self, action) -> AppState:
        logger.debug("dispatch %s", type(action).__name__)
        self.state = reduce(self.state, action)
        return self.state

    def find_item(self, item_id: str) -> Optional[InventoryItem]:
        return next((i for i in self.state.inventory if i.id == item_id), None)
