from dataclasses import replace

import pytest

from core import mock_data
from core.checkout import make_receipt
from core.constants import STOCK_IN, STOCK_LOW, STOCK_OUT
from core.models import InventoryItem
from core.store import (
    INVENTORY,
    ORDERS,
    AddToCart,
    CancelDelete,
    ClearCart,
    CompleteSale,
    ConfirmDelete,
    ImportItems,
    Navigate,
    RecordAction,
    RemoveFromCart,
    RequestDelete,
    ToggleCategory,
    ToggleSidebar,
    UpdateQuantity,
    initial_state,
    reduce,
    save_item,
)


def test_initial_state_is_seeded():
    state = initial_state()
    assert len(state.inventory) == len(mock_data.INVENTORY_ITEMS)
    assert len(state.products) == 12
    assert state.cart == ()
    assert state.path == "/"
    assert state.pending_delete is None


def test_save_new_item_gets_id_and_status(store):
    item = InventoryItem(id="", sku="NEW-1", name="Cable", quantity=3, reorder_point=5)
    store.dispatch(save_item(item))

    saved = store.state.inventory[-1]
    assert saved.id.startswith("item-")
    assert saved.name == "Cable"
    assert saved.status == STOCK_LOW
    assert len(store.state.inventory) == len(mock_data.INVENTORY_ITEMS) + 1


def test_edit_replaces_in_place_and_recomputes_status(store):
    watch = store.find_item("2")
    assert watch.status == STOCK_LOW

    store.dispatch(save_item(replace(watch, quantity=40)))
    assert store.find_item("2").status == STOCK_IN
    assert [i.id for i in store.state.inventory] == ["1", "2", "3", "4", "5"]

    store.dispatch(save_item(replace(watch, quantity=0)))
    assert store.find_item("2").status == STOCK_OUT


def test_edit_of_unknown_item_is_ignored(store):
    before = store.state.inventory
    ghost = InventoryItem(id="ghost", sku="X", name="Ghost")
    store.dispatch(save_item(ghost))
    assert store.state.inventory == before


def test_blank_category_falls_back_to_defaults(store):
    store.dispatch(save_item(InventoryItem(id="", sku="S", name="Thing", category="", sub_category="")))
    saved = store.state.inventory[-1]
    assert saved.category == "Uncategorized"
    assert saved.sub_category == "General"


def test_import_updates_matches_and_appends_new(store):
    updated = replace(store.find_item("1"), quantity=0)
    new = InventoryItem(id="item-new", sku="NEW", name="New Thing", quantity=50)
    store.dispatch(ImportItems((updated, new)))

    assert store.find_item("1").status == STOCK_OUT
    assert store.state.inventory[-1].id == "item-new"
    assert store.state.inventory[-1].status == STOCK_IN


def test_toggle_category(store):
    first, second = store.state.categories[:2]
    store.dispatch(ToggleCategory(first.name))
    assert store.state.categories[0].expanded is not first.expanded
    assert store.state.categories[1].expanded is second.expanded

    store.dispatch(ToggleCategory(first.name))
    assert store.state.categories[0].expanded is first.expanded


def test_cart_actions(store, widget, gadget):
    store.dispatch(AddToCart(widget))
    store.dispatch(AddToCart(gadget))
    store.dispatch(AddToCart(widget))
    assert [(line.product.id, line.quantity) for line in store.state.cart] == [("p1", 2), ("p2", 1)]

    store.dispatch(UpdateQuantity("p2", 0))
    assert [line.product.id for line in store.state.cart] == ["p1"]

    store.dispatch(RemoveFromCart("p1"))
    assert store.state.cart == ()

    store.dispatch(AddToCart(gadget))
    store.dispatch(ClearCart())
    assert store.state.cart == ()


def test_complete_sale_clears_cart_and_records_receipt(store, widget):
    store.dispatch(AddToCart(widget))
    receipt = make_receipt(store.state.cart, "cash")
    store.dispatch(CompleteSale(receipt))

    assert store.state.cart == ()
    assert store.state.sales == (receipt,)


def test_delete_needs_confirmation(store):
    store.dispatch(RequestDelete(INVENTORY, "4", "Laptop Stand"))
    assert store.find_item("4") is not None
    assert store.state.pending_delete.record_id == "4"

    store.dispatch(ConfirmDelete())
    assert store.find_item("4") is None
    assert store.state.pending_delete is None


def test_cancelled_delete_keeps_item(store):
    store.dispatch(RequestDelete(INVENTORY, "4"))
    store.dispatch(CancelDelete())
    assert store.find_item("4") is not None
    assert store.state.pending_delete is None


def test_delete_on_read_only_list_changes_nothing(store):
    store.dispatch(RequestDelete(ORDERS, "ORD-001"))
    store.dispatch(ConfirmDelete())
    assert len(store.state.orders) == len(mock_data.ORDERS)
    assert store.state.pending_delete is None


def test_request_delete_rejects_unknown_kind(store):
    with pytest.raises(ValueError):
        store.dispatch(RequestDelete("widgets", "1"))


def test_record_action_only_logs(store):
    before = store.state
    store.dispatch(RecordAction(ORDERS, "edit", "ORD-001"))
    assert store.state is before


def test_navigate_and_sidebar(store):
    store.dispatch(Navigate("/Inventory/"))
    assert store.state.path == "/inventory"

    store.dispatch(ToggleSidebar())
    assert store.state.sidebar_collapsed is True


def test_unknown_action_raises():
    with pytest.raises(TypeError):
        reduce(initial_state(), object())
